"""
Python-specific configuration.
"""

from dataclasses import dataclass

from ...core.config import GeneratorOptions


@dataclass
class PythonOptions(GeneratorOptions):
    """Options for Python model generation."""

    # Plain from_dict/to_dict would shadow the GeneratorOptions methods
    aliases = {
        "from_dict": "include_from_dict",
        "fromDict": "include_from_dict",
        "to_dict": "include_to_dict",
        "toDict": "include_to_dict",
    }

    dataclass: bool = True
    frozen: bool = False
    slots: bool = False
    include_from_dict: bool = True
    include_to_dict: bool = True
    type_hints: bool = True
    default_values: bool = False
    camel_case_to_snake_case: bool = True
    include_repr: bool = True
    include_eq: bool = True
    include_hash: bool = False
    nested_classes: bool = True
    sample_instance: bool = False

    @property
    def renders_dataclass(self) -> bool:
        """Dataclass fields need annotations, so hints are required too."""
        return self.dataclass and self.type_hints

    def dataclass_arguments(self) -> list[str]:
        """Keyword arguments for the ``@dataclass(...)`` decorator."""
        arguments = []
        if self.frozen:
            arguments.append("frozen=True")
        if self.slots:
            arguments.append("slots=True")
        if not self.include_repr:
            arguments.append("repr=False")
        if not self.include_eq:
            arguments.append("eq=False")
        if self.include_hash:
            arguments.append("unsafe_hash=True")
        return arguments
