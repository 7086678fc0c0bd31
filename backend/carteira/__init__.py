"""
Carteira: personal finance tracking backend.
"""
