"""
Operator Scripts
Contract deployment and pre-deployment checks
"""
