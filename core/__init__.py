"""
SHIFTCRACK - Settings, logging and result models.
"""
