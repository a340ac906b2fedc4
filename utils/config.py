"""
Run configuration for the Banker's Safety Checker.
"""

from dataclasses import dataclass
from typing import List, Optional

from models.snapshot import InputError

DEFAULT_INPUT_PATH = "input.txt"


@dataclass
class CheckerConfig:
    """
    Settings for one safety-check run.

    Attributes:
        input_path: Path to the snapshot input file
        num_processes: Process count (None = read from input)
        num_resources: Resource-type count (None = read from input)
        resource_names: Display labels for resource types
        trace: Print the recorded simulation trace
        verbose: Narrate the simulation at debug level
        log_file: Optional file mirroring console output
    """
    input_path: str = DEFAULT_INPUT_PATH
    num_processes: Optional[int] = None
    num_resources: Optional[int] = None
    resource_names: Optional[List[str]] = None
    trace: bool = False
    verbose: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_args(cls, args) -> "CheckerConfig":
        """Build configuration from parsed command-line arguments."""
        names = None
        if args.resource_names:
            names = [name.strip() for name in args.resource_names.split(',') if name.strip()]

        return cls(
            input_path=args.input,
            num_processes=args.processes,
            num_resources=args.resources,
            resource_names=names,
            trace=args.trace,
            verbose=args.verbose,
            log_file=args.log_file
        )

    def validate(self) -> None:
        """
        Check configuration consistency.

        Raises:
            InputError: On non-positive dimensions, only one dimension
                configured, or a resource-name count mismatch
        """
        for name, value in (("processes", self.num_processes), ("resources", self.num_resources)):
            if value is not None and value <= 0:
                raise InputError(f"Configured number of {name} must be positive, got {value}")

        if (self.num_processes is None) != (self.num_resources is None):
            raise InputError("--processes and --resources must be given together")

        if self.resource_names and self.num_resources is not None:
            if len(self.resource_names) != self.num_resources:
                raise InputError(
                    f"{len(self.resource_names)} resource names given "
                    f"for {self.num_resources} resource types"
                )
