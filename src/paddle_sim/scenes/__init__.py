"""
Scenes for Paddle Sim, auto-discovered by the scene registry.
"""
