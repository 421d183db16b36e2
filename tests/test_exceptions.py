"""Tests for the exception hierarchy and re-exports."""

from gridtable.exceptions import (
    DuplicateColumnError,
    EmptySchemaError,
    FileDoesNotExistError,
    InvalidFileExtensionError,
    MalformedFormatError,
    RowLengthMismatchError,
    TableError,
    TableFileError,
    UnknownColumnError,
    UnsupportedRowInputError,
)


class TestExceptionHierarchy:
    def test_table_error_is_exception(self):
        assert issubclass(TableError, Exception)

    def test_validation_errors_are_table_errors(self):
        for cls in (
            EmptySchemaError,
            DuplicateColumnError,
            RowLengthMismatchError,
            UnknownColumnError,
            UnsupportedRowInputError,
        ):
            assert issubclass(cls, TableError)
            assert cls.exit_code == 1

    def test_file_errors_exit_code(self):
        for cls in (FileDoesNotExistError, InvalidFileExtensionError, MalformedFormatError):
            assert issubclass(cls, TableFileError)
            assert cls.exit_code == 2

    def test_missing_file_is_builtin_file_not_found(self):
        err = FileDoesNotExistError("x.csv")
        assert isinstance(err, FileNotFoundError)
        assert str(err) == "[ERROR] File 'x.csv' does not exist."
        assert err.path == "x.csv"


class TestErrorAttrs:
    def test_row_length_mismatch(self):
        err = RowLengthMismatchError(3, 2)
        assert (err.got, err.want) == (3, 2)
        assert "3 values" in str(err)
        assert "2 columns" in str(err)

    def test_unknown_column(self):
        err = UnknownColumnError("age")
        assert err.name == "age"
        assert str(err).startswith("[ERROR]")

    def test_duplicate_column(self):
        assert DuplicateColumnError("id").name == "id"

    def test_unsupported_row_input_names_type(self):
        err = UnsupportedRowInputError(42)
        assert err.value == 42
        assert "int" in str(err)

    def test_malformed_format(self):
        err = MalformedFormatError("a.json", "bad")
        assert str(err) == "[ERROR] a.json: bad"

    def test_invalid_extension(self):
        err = InvalidFileExtensionError("a.txt", "csv")
        assert err.expected == "csv"
        assert "regular csv file" in str(err)


class TestReExports:
    def test_init_re_exports(self):
        from gridtable import TableError as InitTableError
        from gridtable import UnknownColumnError as InitUnknown

        assert InitTableError is TableError
        assert InitUnknown is UnknownColumnError
