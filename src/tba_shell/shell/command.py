from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence, TextIO

from ..data.tba_api import TbaApi
from ..reporting.render import print_data
from .dispatcher import Dispatcher, ErrorKind, parse_verbose_level
from .filters import FilterSet, MalformedFilter

SYNTAX_TRAILER = "Invalid command syntax, type ? for help."

COMMAND_HELP = """<Options>:
\t-(0|1|2)\t\t\t- Specifies output verbose level (0: minimum, 1: medium, 2: maximum - default is 1).
<Model>:
\tstatus[?team=<TeamKey>&event=<EventKey>]
\tteams[?(year=<Year>|team=<TeamKey>|event=<EventKey>|district=<DistrictKey>)]
\tevents?(year=<Year>|team=<TeamKey>[&year=<Year>]|event=<EventKey>|district=<DistrictKey>)
\tdistricts?(year=<Year>|team=<TeamKey>)
\tmatches?(team=<TeamKey>&year=<Year>|event=<EventKey>[&team=<TeamKey>]|match=<MatchKey>)
\tawards?(team=<TeamKey>[&year=<Year>]|event=<EventKey>[&team=<TeamKey>])
\trankings?(event=<EventKey>|district=<DistrictKey>)
\toprs?event=<EventKey>
\tdistrict_points?event=<EventKey>
\tinsights?event=<EventKey>
\tpredictions?event=<EventKey>
\talliances?event=<EventKey>
\tyears_participated?team=<TeamKey>
\trobots?team=<TeamKey>
\tmedia?team=<TeamKey>&year=<Year>
\tsocial_media?team=<TeamKey>
"""


@dataclass
class CommandResult:
    data: Any = None
    error: str | None = None
    error_kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _failed(detail: str, kind: ErrorKind | None = None) -> CommandResult:
    message = f"{detail}\n{SYNTAX_TRAILER}" if detail else SYNTAX_TRAILER
    return CommandResult(error=message, error_kind=kind)


class TbaShell:
    """Processes one tokenized command.

    Syntax:
        get <Request>
        list [-<VerboseLevel>] <Model>[?<Filter>{&<Filter>}]
    where <Filter> is <Key>=<Value>.
    """

    def __init__(self, api: TbaApi):
        self.api = api
        self.dispatcher = Dispatcher(api)

    @staticmethod
    def command_help(long_version: bool = False) -> str:
        return COMMAND_HELP + (TbaApi.api_help() if long_version else "")

    def process_command(self, tokens: Sequence[str], out: TextIO | None = None, quiet: bool = False) -> CommandResult:
        tokens = [t for t in tokens if t]
        if len(tokens) == 2 and tokens[0] == "get":
            res = self.api.get(tokens[1])
            if res.data is None:
                return _failed("")
            if not quiet:
                print_data(res.data, out=out)
            return CommandResult(data=res.data)

        if tokens and tokens[0] == "list" and len(tokens) in (2, 3):
            return self._list(tokens[1:], out, quiet)

        return _failed("")

    def _list(self, args: list[str], out: TextIO | None, quiet: bool) -> CommandResult:
        verbose_level = 1
        if len(args) == 2:
            option, request = args
            if not option.startswith("-"):
                return _failed('Invalid request option, expecting "-<VerboseLevel>".', ErrorKind.BAD_VERBOSITY)
            try:
                verbose_level = parse_verbose_level(option[1:])
            except ValueError as e:
                return _failed(str(e), ErrorKind.BAD_VERBOSITY)
        else:
            request = args[0]

        params = request.split("?")
        if len(params) > 2:
            return _failed('Invalid request syntax, expecting "<Model>?<Filters>".', ErrorKind.MALFORMED_FILTER)
        filters = None
        if len(params) == 2 and params[1]:
            try:
                filters = FilterSet.parse(params[1])
            except MalformedFilter as e:
                return _failed(str(e), ErrorKind.MALFORMED_FILTER)

        res = self.dispatcher.dispatch(params[0], filters, verbose_level, out=out, quiet=quiet)
        if not res.ok:
            return _failed(res.error or "", res.error_kind)
        return CommandResult(data=res.data)
