"""Command-line parsing with flags, options, aliases and sub-commands."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

CommandCallback = Callable[[str, "ArgParser"], None]


class ArgError(Exception):
    """Raised when the command line cannot be parsed."""


@dataclass
class _Flag:
    count: int = 0


@dataclass
class _Option:
    fallback: str = ""
    values: list[str] = field(default_factory=list)


class ArgParser:
    """Parses flags, options, positional arguments and commands.

    Names given to ``flag``, ``option`` and ``command`` may hold several
    whitespace-separated aliases that share one entry.
    """

    def __init__(
        self,
        helptext: str = "",
        version: str = "",
        callback: Optional[CommandCallback] = None,
    ) -> None:
        self.args: list[str] = []
        self.helptext = helptext
        self.version = version
        self.callback = callback
        self._options: dict[str, _Option] = {}
        self._flags: dict[str, _Flag] = {}
        self._commands: dict[str, ArgParser] = {}
        self._command_name = ""

    # Registration.

    def flag(self, name: str) -> None:
        """Register a flag under every alias in ``name``."""
        entry = _Flag()
        for alias in name.split():
            self._flags[alias] = entry

    def option(self, name: str, fallback: str = "") -> None:
        """Register an option under every alias in ``name``."""
        entry = _Option(fallback=fallback)
        for alias in name.split():
            self._options[alias] = entry

    def command(
        self,
        name: str,
        helptext: str = "",
        callback: Optional[CommandCallback] = None,
    ) -> ArgParser:
        """Register a command and return the parser for its arguments."""
        parser = ArgParser(helptext=helptext, callback=callback)
        for alias in name.split():
            self._commands[alias] = parser
        return parser

    # Retrieval.

    def found(self, name: str) -> bool:
        """Whether a flag or option was given at least once."""
        return self.count(name) > 0

    def count(self, name: str) -> int:
        """How many times a flag or option was given."""
        if name in self._flags:
            return self._flags[name].count
        if name in self._options:
            return len(self._options[name].values)
        return 0

    def value(self, name: str) -> str:
        """The last value given for an option, or its fallback."""
        entry = self._options.get(name)
        if entry is None:
            return ""
        return entry.values[-1] if entry.values else entry.fallback

    def values(self, name: str) -> list[str]:
        """Every value given for an option, in order."""
        entry = self._options.get(name)
        return list(entry.values) if entry is not None else []

    def command_found(self) -> bool:
        return self._command_name != ""

    def command_name(self) -> str:
        return self._command_name

    def command_parser(self) -> ArgParser:
        if not self.command_found():
            raise ArgError("no command was found")
        return self._commands[self._command_name]

    # Parsing.

    def parse(self, args: Iterable[str]) -> None:
        """Parse a sequence of arguments, not including the program name.

        Printing help or the version ends the program with ``SystemExit(0)``.
        """
        self._parse(deque(args))

    def _parse(self, stream: deque[str]) -> None:
        is_first_arg = True
        while stream:
            arg = stream.popleft()

            if arg == "--":
                self.args.extend(stream)
                stream.clear()
                continue

            if arg.startswith("--"):
                self._parse_long(arg[2:], stream)
                continue

            # A lone dash or a dash followed by a digit is positional.
            if arg.startswith("-"):
                if len(arg) == 1 or arg[1] in "0123456789":
                    self.args.append(arg)
                else:
                    self._parse_short(arg[1:], stream)
                continue

            if is_first_arg and arg in self._commands:
                parser = self._commands[arg]
                self._command_name = arg
                parser._parse(stream)
                if parser.callback is not None:
                    parser.callback(arg, parser)
                continue

            if is_first_arg and arg == "help" and self._commands:
                if not stream:
                    raise ArgError("the help command requires an argument.")
                name = stream.popleft()
                if name not in self._commands:
                    raise ArgError(f"'{name}' is not a recognised command.")
                print(self._commands[name].helptext)
                raise SystemExit(0)

            self.args.append(arg)
            is_first_arg = False

    def _parse_equals(self, prefix: str, name: str, value: str) -> None:
        entry = self._options.get(name)
        if entry is None:
            raise ArgError(f"{prefix}{name} is not a recognised option.")
        if not value:
            raise ArgError(f"missing value for {prefix}{name}.")
        entry.values.append(value)

    def _parse_long(self, arg: str, stream: deque[str]) -> None:
        name, sep, value = arg.partition("=")
        if sep:
            self._parse_equals("--", name, value)
            return

        if arg in self._flags:
            self._flags[arg].count += 1
            return

        if arg in self._options:
            if not stream:
                raise ArgError(f"missing argument for --{arg}.")
            self._options[arg].values.append(stream.popleft())
            return

        if arg == "help" and self.helptext:
            print(self.helptext)
            raise SystemExit(0)
        if arg == "version" and self.version:
            print(self.version)
            raise SystemExit(0)

        raise ArgError(f"--{arg} is not a recognised flag or option.")

    def _parse_short(self, arg: str, stream: deque[str]) -> None:
        name, sep, value = arg.partition("=")
        if sep:
            self._parse_equals("-", name, value)
            return

        for char in arg:
            if char in self._flags:
                self._flags[char].count += 1
                continue

            if char in self._options:
                if not stream:
                    if len(arg) > 1:
                        raise ArgError(f"missing argument for '{char}' in -{arg}.")
                    raise ArgError(f"missing argument for -{char}.")
                self._options[char].values.append(stream.popleft())
                continue

            if char == "h" and self.helptext:
                print(self.helptext)
                raise SystemExit(0)
            if char == "v" and self.version:
                print(self.version)
                raise SystemExit(0)

            if len(arg) > 1:
                raise ArgError(f"'{char}' in -{arg} is not a recognised flag or option.")
            raise ArgError(f"-{char} is not a recognised flag or option.")

    # Inspection.

    def dump(self) -> str:
        """Describe the parser's state: options, flags, arguments, command."""
        lines = ["Options:"]
        if self._options:
            for name in sorted(self._options):
                entry = self._options[name]
                lines.append(f"  {name}: ({entry.fallback}) [{', '.join(entry.values)}]")
        else:
            lines.append("  [none]")

        lines += ["", "Flags:"]
        if self._flags:
            lines.extend(f"  {name}: {self._flags[name].count}" for name in sorted(self._flags))
        else:
            lines.append("  [none]")

        lines += ["", "Arguments:"]
        if self.args:
            lines.extend(f"  {arg}" for arg in self.args)
        else:
            lines.append("  [none]")

        lines += ["", "Command:"]
        lines.append(f"  {self._command_name}" if self.command_found() else "  [none]")
        return "\n".join(lines) + "\n"