"""ESC/P protocol layer: command tables and the printer driver."""
