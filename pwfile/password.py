import logging
import string
import subprocess
from dataclasses import dataclass
from typing import List

from .errors import (GeneratorFailed, GeneratorKilled, GeneratorProducedNothing,
                     GeneratorSpawnError, GeneratorStderrUnreadable,
                     GeneratorStdoutUnreadable, GeneratorWaitError)

logger = logging.getLogger(__name__)

PWGEN = "pwgen"


@dataclass(frozen=True)
class PwgenOptions:
    count: int = 1
    length: int = 34
    use_capitals: bool = True
    use_digits: bool = True
    use_symbols: bool = True
    avoid_ambiguous: bool = True
    no_repeating_adjacent: bool = True

    def to_args(self) -> List[str]:
        args = []
        if self.use_capitals: args.append("-c")
        if self.use_digits: args.append("-n")
        if self.use_symbols: args.append("-y")
        # -s: fully random output instead of pronounceable runs
        if self.no_repeating_adjacent: args.append("-s")
        if self.avoid_ambiguous: args.append("-B")
        args += ["-1", str(self.length), str(self.count)]
        return args


# The only policy `gen` ever uses.
POLICY = PwgenOptions()


def _read(stream) -> str:
    return stream.read().strip() if stream is not None else ""


def run_pwgen(options: PwgenOptions = POLICY, program: str = PWGEN) -> str:
    """Run pwgen once and return its trimmed output."""
    try:
        proc = subprocess.Popen([program, *options.to_args()],
                                stdin=subprocess.DEVNULL,
                                stdout=subprocess.PIPE,
                                stderr=subprocess.PIPE,
                                text=True, encoding="utf-8")
    except OSError as e:
        raise GeneratorSpawnError(e) from e

    with proc:
        try:
            code = proc.wait()
        except OSError as e:
            raise GeneratorWaitError(e) from e

        if code < 0:
            raise GeneratorKilled(-code)
        if code > 0:
            try:
                message = _read(proc.stderr)
            except (OSError, ValueError) as e:
                raise GeneratorStderrUnreadable(code, e) from e
            raise GeneratorFailed(code, message or None)

        try:
            out = _read(proc.stdout)
        except (OSError, ValueError) as e:
            raise GeneratorStdoutUnreadable(e) from e
    if not out:
        raise GeneratorProducedNothing()
    return out


def starts_with_punctuation(candidate: str) -> bool:
    # string.punctuation is exactly the ASCII punctuation set
    return bool(candidate) and candidate[0] in string.punctuation


def generate_password(options: PwgenOptions = POLICY, program: str = PWGEN) -> str:
    """Keep asking pwgen until it returns a password that doesn't start with a symbol.

    There is no attempt limit: a pwgen that only ever emits symbol-first
    passwords makes this loop forever. pwgen failures are never retried.
    """
    attempt = 0
    while True:
        attempt += 1
        candidate = run_pwgen(options, program)
        if starts_with_punctuation(candidate):
            logger.debug("Attempt %d starts with %r, generating another", attempt, candidate[0])
            continue
        logger.info("Accepted password after %d attempt(s)", attempt)
        return candidate
