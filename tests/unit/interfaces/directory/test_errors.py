"""Unit tests for roster.interfaces.directory.errors."""

import pytest

from roster.interfaces.directory import errors

# pylint: disable=magic-value-comparison


class TestDirectoryError:
    """Tests for DirectoryError."""

    @staticmethod
    def test_directory_error_message_custom():
        """DirectoryError uses the provided message if given."""
        error = errors.DirectoryError(
            kind="department", key="SALES", message="Custom error message"
        )
        assert str(error) == "Custom error message"

    @staticmethod
    def test_directory_error_message_default():
        """DirectoryError uses a default message if none is provided."""
        error = errors.DirectoryError(kind="department", key="SALES")
        assert str(error) == "department (SALES) directory error"

    @staticmethod
    def test_directory_error_attributes():
        """DirectoryError stores the kind and key attributes correctly."""
        error = errors.DirectoryError(kind="employee", key="BABY DRIVER")
        assert error.kind == "employee"
        assert error.key == "BABY DRIVER"


@pytest.mark.parametrize(
    "error, base, kind, key, message",
    [
        (
            errors.DuplicateDepartmentError("sales"),
            errors.ConflictError,
            "department",
            "SALES",
            'Department "sales" already exists',
        ),
        (
            errors.DepartmentNotFoundError("Shipping"),
            errors.NotFoundError,
            "department",
            "SHIPPING",
            'Department "Shipping" not found',
        ),
        (
            errors.DuplicateEmployeeError("Baby Driver"),
            errors.ConflictError,
            "employee",
            "BABY DRIVER",
            'Employee "Baby Driver" already exists',
        ),
        (
            errors.EmployeeNotFoundError("baby driver"),
            errors.NotFoundError,
            "employee",
            "BABY DRIVER",
            'Employee "baby driver" not found',
        ),
        (
            errors.UnknownEmployeeError("Baby Driver"),
            errors.NotFoundError,
            "employee",
            "BABY DRIVER",
            'Employee "Baby Driver" does not exist',
        ),
        (
            errors.TransferConflictError("Baby Driver", "Sales"),
            errors.ConflictError,
            "employee",
            "BABY DRIVER",
            'Employee "Baby Driver" already exists in department "Sales"',
        ),
    ],
)
def test_concrete_errors(error, base, kind, key, message):
    """Concrete errors carry their kind, key, message, and error category."""
    assert isinstance(error, base)
    assert isinstance(error, errors.DirectoryError)
    assert error.kind == kind
    assert error.key == key
    assert str(error) == message


def test_transfer_conflict_error_keeps_department():
    """TransferConflictError records the target department as typed."""
    error = errors.TransferConflictError("Baby Driver", "sales")
    assert error.name == "Baby Driver"
    assert error.department == "sales"


@pytest.mark.parametrize(
    "error_type", [errors.DirectoryInvariantError, errors.SeedError]
)
def test_fatal_errors_are_not_directory_errors(error_type):
    """Invariant and seed failures are programming errors, not query errors."""
    assert issubclass(error_type, RuntimeError)
    assert not issubclass(error_type, errors.DirectoryError)


@pytest.mark.parametrize(
    "error, key",
    [
        (errors.EmployeeNotFoundError("baby   driver"), "BABY DRIVER"),
        (errors.UnknownEmployeeError("  baby driver "), "BABY DRIVER"),
        (errors.DuplicateEmployeeError("baby\tdriver"), "BABY DRIVER"),
        (errors.TransferConflictError("baby  driver", "Sales"), "BABY DRIVER"),
        (errors.DepartmentNotFoundError("sHiPpInG"), "SHIPPING"),
    ],
)
def test_error_key_matches_store_key(error, key):
    """The key is the normalized store key, not the raw input uppercased."""
    assert error.key == key


def test_error_key_matches_collection_key(departments):
    """A lookup miss reports the same key a stored entity would have."""
    departments.create("Shipping")
    employees = departments.find("Shipping").employees
    employees.create("Baby Driver")
    stored = employees.find("baby   DRIVER")

    with pytest.raises(errors.EmployeeNotFoundError) as excinfo:
        employees.delete("doc   holliday")

    assert stored.key == "BABY DRIVER"
    assert excinfo.value.key == "DOC HOLLIDAY"
