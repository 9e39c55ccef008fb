"""Default configuration: AAA -> ZZZ, and every ..A node to any ..Z node."""

from nodewalk.config.navigation import NavigationConfig

DEFAULT_CONFIG = NavigationConfig()
