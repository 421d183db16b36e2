"""
gridtable exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class TableError(Exception):
    """Exit code 1 — schema, row validation, and rendering errors."""

    exit_code = 1


class EmptySchemaError(TableError):
    """Raised when a table would be created without any column."""

    def __init__(self):
        super().__init__("[ERROR] A table needs at least one column.")


class DuplicateColumnError(TableError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"[ERROR] Column '{name}' already exists.")


class RowLengthMismatchError(TableError):
    """Ordered-value row whose length differs from the column count."""

    def __init__(self, got, want):
        self.got = got
        self.want = want
        super().__init__(f"[ERROR] Row has {got} values but the table has {want} columns.")


class UnknownColumnError(TableError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"[ERROR] Column '{name}' does not exist.")


class UnsupportedRowInputError(TableError):
    """Row input that is neither a sequence nor a mapping of strings."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"[ERROR] Unsupported row input of type {type(value).__name__}. "
            "Use a list of strings or a dict of column -> string."
        )


class TableFileError(TableError):
    """Exit code 2 — missing, mistyped, or malformed input files."""

    exit_code = 2


class FileDoesNotExistError(TableFileError, FileNotFoundError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"[ERROR] File '{path}' does not exist.")

    def __str__(self):
        return self.args[0]


class InvalidFileExtensionError(TableFileError):
    def __init__(self, path, expected):
        self.path = path
        self.expected = expected
        super().__init__(f"[ERROR] '{path}' is not a regular {expected} file.")


class MalformedFormatError(TableFileError):
    """Content is not valid CSV/JSON of the expected table shape."""

    def __init__(self, source, detail):
        self.source = source
        self.detail = detail
        super().__init__(f"[ERROR] {source}: {detail}")
