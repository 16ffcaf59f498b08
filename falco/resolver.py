"""Sources of VCL input: files on disk or a terraform plan read from a stream."""

from __future__ import annotations

import os
import queue
import sys
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import IO, Iterable, Optional

from falco.terraform import parse_terraform_planned_input

_VCL_EXTENSION = ".vcl"


class ResolverError(Exception):
    """Raised when VCL input cannot be found or read."""


@dataclass
class VclFile:
    """A VCL source with the name it is known by."""

    name: str
    data: str


class Resolver(ABC):
    """Supplies the main VCL and resolves included modules."""

    @property
    def name(self) -> str:
        """Service name, empty when the input is not tied to a service."""
        return ""

    @abstractmethod
    def main_vcl(self) -> VclFile:
        """Return the main VCL."""

    @abstractmethod
    def resolve(self, module: str) -> VclFile:
        """Return the VCL of an included module."""


class FileResolver(Resolver):
    """Reads VCL from the filesystem, searching include paths for modules."""

    def __init__(self, main: str, include_paths: Iterable[str] = ()):
        self.main = main
        self.include_paths = list(include_paths)

    @staticmethod
    def _read(path: str) -> VclFile:
        with open(path, encoding="utf-8") as fp:
            return VclFile(name=path, data=fp.read())

    def main_vcl(self) -> VclFile:
        return self._read(self.main)

    def resolve(self, module: str) -> VclFile:
        filename = module if module.endswith(_VCL_EXTENSION) else module + _VCL_EXTENSION
        for directory in self.include_paths:
            try:
                return self._read(os.path.join(directory, filename))
            except OSError:
                continue
        raise ResolverError(f"Failed to resolve include file: {module}.vcl")


@dataclass
class StdinResolver(Resolver):
    """Holds the VCL files of one service taken from a terraform plan."""

    main: Optional[VclFile] = None
    modules: list[VclFile] = field(default_factory=list)
    service_name: str = ""

    @property
    def name(self) -> str:
        return self.service_name

    def main_vcl(self) -> VclFile:
        if self.main is None:
            raise ResolverError(f'Main VCL is not found for service "{self.service_name}"')
        return self.main

    def resolve(self, module: str) -> VclFile:
        for vcl in self.modules:
            if vcl.name == module:
                return vcl
        raise ResolverError(f"Failed to resolve include file: {module}.vcl")


def new_file_resolvers(main: str, include_paths: Optional[Iterable[str]] = None) -> list[Resolver]:
    """Build the single file resolver for a main VCL file."""
    if not main:
        raise ResolverError("Input file is empty")
    try:
        os.stat(main)
    except FileNotFoundError as exc:
        raise ResolverError(f"Input file {main} is not found") from exc
    except OSError as exc:
        raise ResolverError(f"Unexpected stat error: {exc}") from exc

    absolute = os.path.abspath(main)
    paths = [os.path.abspath(p) for p in include_paths or ()]
    paths.append(os.path.dirname(absolute))
    return [FileResolver(absolute, paths)]


def new_stdin_resolvers(stream: Optional[IO] = None, timeout: float = 10.0) -> list[Resolver]:
    """Read a terraform plan from a stream and build one resolver per service.

    Reading gives up after ``timeout`` seconds so that a missing input does not hang.
    """
    if stream is None:
        stream = getattr(sys.stdin, "buffer", sys.stdin)

    results: queue.Queue = queue.Queue(maxsize=1)

    def _reader() -> None:
        try:
            results.put((True, stream.read()))
        except Exception as exc:  # reported to the caller below
            results.put((False, exc))

    threading.Thread(target=_reader, daemon=True).start()
    try:
        ok, payload = results.get(timeout=timeout)
    except queue.Empty:
        raise ResolverError("Failed to read from stdin: timed out") from None
    if not ok:
        raise ResolverError(f"Failed to read from stdin: {payload}") from payload

    resolvers: list[Resolver] = []
    for service in parse_terraform_planned_input(payload):
        resolver = StdinResolver(service_name=service.name)
        for vcl in service.vcls:
            entry = VclFile(name=vcl.name, data=vcl.content)
            if vcl.main:
                resolver.main = entry
            else:
                resolver.modules.append(entry)
        resolvers.append(resolver)
    return resolvers