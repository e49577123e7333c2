"""Configuration classes for numtrail runs."""

from dataclasses import dataclass

from numtrail.errors import InvalidCount

OUTPUT_FORMATS = ("text", "json")


@dataclass
class TrailConfig:
    """Settings for a single trail computation and its rendering."""

    # Report format written to stdout
    output_format: str = "text"

    # Print the adjacency listing before the trail section (text format only)
    show_edges: bool = True

    # Prompt shown before each interactive read
    prompt: str = "Enter a number: "

    # Upper bound on vertex count; the engine is cubic in this value
    max_vertices: int = 2000

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            valid = ", ".join(OUTPUT_FORMATS)
            raise ValueError(
                f"Invalid output_format '{self.output_format}'. Valid values are: {valid}"
            )
        if self.max_vertices < 1:
            raise ValueError("max_vertices must be positive")

    def check_count(self, count: int) -> int:
        """Validate a vertex count against this configuration.

        Raises:
            InvalidCount: If ``count`` is not positive or exceeds ``max_vertices``.
        """
        if count < 1:
            raise InvalidCount(f"Count must be a positive integer, got {count}")
        if count > self.max_vertices:
            raise InvalidCount(
                f"Count {count} exceeds the configured maximum of {self.max_vertices}"
            )
        return count


# Global configuration instance
DEFAULT_CONFIG = TrailConfig()
