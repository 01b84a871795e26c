"""
application - Use-case services and their request DTOs.

Depends on domain/ only; repositories arrive through the constructors.
"""
