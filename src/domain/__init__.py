"""
domain - Entities, value objects, ports and exceptions.

Pure Python. Imports nothing from infrastructure/, application/ or adapters/.
"""
