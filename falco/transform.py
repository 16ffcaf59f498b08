"""External transformer programs that receive encoded VCL on standard input."""

from __future__ import annotations

import shutil
import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import IO, Optional, Union

_COMMAND_PREFIX = "falco-transform-"


class TransformerNotFoundError(LookupError):
    """Raised when no transformer command is found in PATH."""


@dataclass
class Transformer:
    """A transformer command and the executable it resolves to."""

    command: str
    bin: str

    def execute(self, data: Union[bytes, str], output: Optional[IO[str]] = None) -> None:
        """Run the transformer with ``data`` on stdin, echoing its output with a prefix.

        Raises subprocess.CalledProcessError if the command exits with a failure.
        """
        out = output if output is not None else sys.stderr
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)

        with subprocess.Popen(
            [self.bin],
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        ) as proc:
            feeder = threading.Thread(target=_feed, args=(proc.stdin, payload), daemon=True)
            feeder.start()
            for chunk in proc.stdout:
                out.write(f"[{self.command}] {chunk.decode('utf-8', 'replace')}")
            feeder.join()
            code = proc.wait()

        if code != 0:
            raise subprocess.CalledProcessError(code, self.bin)


def _feed(pipe: IO[bytes], payload: bytes) -> None:
    try:
        pipe.write(payload)
    except BrokenPipeError:
        pass
    finally:
        try:
            pipe.close()
        except BrokenPipeError:
            pass


def new_transformer(name: str) -> Transformer:
    """Find the ``falco-transform-<name>`` command in PATH."""
    command = f"{_COMMAND_PREFIX}{name}"
    path = shutil.which(command)
    if path is None:
        raise TransformerNotFoundError(f'Transformer command "{command}" does not exist in PATH')
    return Transformer(command=command, bin=path)