"""Line-processing commands of the demo application.

Registration order matters among these equal-priority commands:
:class:`CopyCommand` accepts everything and must come last.
"""

from sw_cli.cli.actions.copy import CopyCommand
from sw_cli.cli.actions.count import CountCommand
from sw_cli.cli.actions.grep import GrepCommand
from sw_cli.cli.actions.reverse import ReverseCommand

__all__: list[str] = [
    "CopyCommand",
    "CountCommand",
    "GrepCommand",
    "ReverseCommand",
]
