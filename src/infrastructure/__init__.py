"""
infrastructure - Concrete implementations of domain ports.

Contains all vendor-specific code: configuration loading and the aiosqlite
persistence layer. Depends on domain/ only (implements ports). Never
imported by application/.
"""
