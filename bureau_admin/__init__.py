"""
Bureau Directory Admin Service
"""
