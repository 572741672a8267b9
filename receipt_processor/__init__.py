"""
Receipt processor - reward points for purchase receipts
"""
