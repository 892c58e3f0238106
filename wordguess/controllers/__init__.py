"""
Controllers Package

Contains the HTTP blueprints for the game and word endpoints.
"""
