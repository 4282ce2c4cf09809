"""
Language-specific code generators.

Each subpackage exposes a generator class, its options dataclass and a
``generate_<language>_code`` convenience function.
"""
