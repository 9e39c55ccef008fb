"""Navigation configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SinglePathConfig:
    """Fixed start node to fixed goal node."""

    start: str = "AAA"
    goal: str = "ZZZ"
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class MultiPathConfig:
    """Every node ending in start_suffix, walked to any node ending in goal_suffix."""

    start_suffix: str = "A"
    goal_suffix: str = "Z"
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Guards applied to every walk."""

    max_steps: int | None = None  # None = walk until a goal is reached
    check_reachability: bool = True  # reject starts with no reachable goal
    verify_periodicity: bool = False  # check the lcm precondition per walk


@dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Top-level configuration composing all sub-configs.

    Cross-field validation runs in __post_init__ to reject invalid
    configurations early.
    """

    input_path: str = "input1.txt"
    single: SinglePathConfig = field(default_factory=SinglePathConfig)
    multi: MultiPathConfig = field(default_factory=MultiPathConfig)
    walk: WalkConfig = field(default_factory=WalkConfig)
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.input_path:
            raise ValueError("input_path must not be empty")
        if not self.single.start or not self.single.goal:
            raise ValueError(
                f"single start/goal must be non-empty, got "
                f"{self.single.start!r} -> {self.single.goal!r}"
            )
        if not self.multi.start_suffix or not self.multi.goal_suffix:
            raise ValueError(
                f"multi start_suffix/goal_suffix must be non-empty, got "
                f"{self.multi.start_suffix!r} -> {self.multi.goal_suffix!r}"
            )
        if self.walk.max_steps is not None and self.walk.max_steps <= 0:
            raise ValueError(
                f"max_steps must be positive, got {self.walk.max_steps}"
            )
        if not (self.single.enabled or self.multi.enabled):
            raise ValueError("at least one of single/multi must be enabled")
