"""
Domain layer - region model, sample buffer and interfaces.
"""
