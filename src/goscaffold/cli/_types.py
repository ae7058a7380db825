"""Enums for CLI options."""

from enum import Enum


class License(str, Enum):
    """Available project licenses."""

    MIT = "mit"
    BSD_3_CLAUSE = "bsd-3-clause"
    APACHE_2_0 = "apache-2.0"
    UNLICENSE = "unlicense"

    @property
    def label(self) -> str:
        labels: dict[License, str] = {
            License.MIT: "MIT License",
            License.BSD_3_CLAUSE: "BSD 3-Clause License",
            License.APACHE_2_0: "Apache License 2.0",
            License.UNLICENSE: "The Unlicense",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[License, str] = {
            License.MIT: "Short permissive license. Keep the copyright notice.",
            License.BSD_3_CLAUSE: "Permissive, forbids using contributor names for endorsement.",
            License.APACHE_2_0: "Permissive with an explicit patent grant. Writes the short notice form.",  # noqa: E501
            License.UNLICENSE: "Public domain dedication. No copyright line.",
        }
        return descriptions[self]

    @property
    def template(self) -> str:
        """Resource name of the license text."""
        return f"{self.value.replace('-', '_').replace('.', '_')}.tmpl"
