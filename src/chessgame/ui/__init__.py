"""PyQt6 front end: a button-grid board driven by the game controller."""
