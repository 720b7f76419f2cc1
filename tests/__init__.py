"""
WhatsApp Identity Test Suite
"""
