class PwError(Exception):
    """Base class for every error pwfile reports to the user."""


# --- Store ---

class StoreError(PwError):
    pass


class NoStoreFound(StoreError):
    def __init__(self, default_path: str):
        self.default_path = default_path
        super().__init__(f"No default password file found at {default_path}")


class StoreReadError(StoreError):
    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read password file {path}: {cause}")


# --- Parsing ---

class ParseError(PwError):
    component = ""

    def __init__(self, line: int, detail: str | None = None):
        self.line = line
        super().__init__(f"Invalid entry at line {line}, {detail or 'missing ' + self.component}")


class MissingMarker(ParseError):
    component = "marker"


class MissingName(ParseError):
    component = "name"


class MissingLink(ParseError):
    component = "link"


class MissingUsername(ParseError):
    component = "username"


class MissingPassword(ParseError):
    component = "password"


class InvalidMarker(ParseError):
    def __init__(self, line: int, marker: str):
        self.marker = marker
        super().__init__(line, f"invalid marker {marker!r}")


# --- Queries ---

class QueryError(PwError):
    pass


class NoMatches(QueryError):
    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No matches found for {query}")


class AmbiguousMatch(QueryError):
    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Found more than 1 match for {query}")


# --- pwgen ---

class GeneratorError(PwError):
    pass


class GeneratorSpawnError(GeneratorError):
    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(f"Could not run pwgen: {cause}")


class GeneratorWaitError(GeneratorError):
    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(f"Could not wait on pwgen process: {cause}")


class GeneratorKilled(GeneratorError):
    def __init__(self, signal: int):
        self.signal = signal
        super().__init__(f"Pwgen died from signal {signal}")


class GeneratorFailed(GeneratorError):
    def __init__(self, code: int, message: str | None = None):
        self.code = code
        self.message = message
        if message:
            super().__init__(f"Pwgen failed (exit code {code}): {message}")
        else:
            super().__init__(f"Pwgen failed with exit code {code}")


class GeneratorStderrUnreadable(GeneratorError):
    def __init__(self, code: int, cause: Exception):
        self.code = code
        self.cause = cause
        super().__init__(
            f"Pwgen failed (exit code {code}) but could not read its error message: {cause}")


class GeneratorStdoutUnreadable(GeneratorError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Pwgen succeeded but could not read its output: {cause}")


class GeneratorProducedNothing(GeneratorError):
    def __init__(self):
        super().__init__("Pwgen succeeded but did not generate anything")
