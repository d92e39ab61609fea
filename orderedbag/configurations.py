from dataclasses import dataclass


@dataclass
class Configurations:
    verify_invariants: bool = False
    repr_max_entries: int = 10
