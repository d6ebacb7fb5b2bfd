"""Seed fixture for populating a fresh directory.

The fixture is applied through the same public collection operations that
queries use, so a seeded directory obeys exactly the same invariants as one
built by hand.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roster.interfaces.directory.errors import ConflictError, SeedError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from roster.interfaces.directory import DepartmentCollection

logger = logging.getLogger(__name__)

SEED_DATA: dict[str, tuple[str, ...]] = {
    "Accounting": (
        "Liyah Meadows",
        "Miranda Roche",
        "Kaci Costa",
        "Kirk Short",
        "Olivia-Mae Schneider",
        "Anil Mcgregor",
        "Benjamin Cotton",
        "Madison Wyatt",
        "Shyam Calderon",
        "Kurtis Pollard",
    ),
    "Design": (
        "Atif Wells",
        "Caspar Whitney",
        "Ibrar Bloom",
        "Kayden Serrano",
        "Ariyan James",
        "Zahraa Marriott",
        "Stefanie Healy",
        "Fatema Garrison",
        "Mary Spence",
        "Keavy Barnard",
    ),
    "Engineering": (
        "Alejandro Heath",
        "Gaia Floyd",
        "Alessandra Cresswell",
        "Hubert Farley",
        "Jordanna Allman",
        "Samiha Yoder",
        "Wendy Flowers",
        "Lacey-May Hatfield",
        "Leela Tomlinson",
        "Corey Baldwin",
    ),
    "Logistics": (
        "Zara Dupont",
        "Kingsley Calderon",
        "Betty Tierney",
        "Annaliese Russo",
        "Arron Thatcher",
        "Monty Turnbull",
        "Mehreen Ortiz",
        "Darin Redman",
        "Kain Burt",
        "Selina Chase",
    ),
    "Production": (
        "Connie Bowen",
        "Faizaan Lindsay",
        "Zayan Gentry",
        "Asa Mccormack",
        "Miya Conroy",
        "Wilfred Albert",
        "Giacomo Malone",
        "Alissa Mccarthy",
        "Lee Oakley",
        "Kie Slater",
    ),
    "Purchasing": (
        "Brogan Benjamin",
        "Dominik Pittman",
        "Alaw Munoz",
        "Fatima Huang",
        "Rahul Bush",
        "Lowri Griffiths",
        "Eshan Morrow",
        "Aayan Rich",
        "Sufyaan Sellers",
        "Lacey Prentice",
    ),
    "Sales": (
        "Waseem Guerrero",
        "Mayson Krueger",
        "Cadi Moses",
        "Abbas Peters",
        "Dawid Bowen",
        "Riaz Hull",
        "Sahib Mcgrath",
        "Catrin Leon",
        "Aleyna Markham",
        "Elouise Guest",
    ),
}


def populate(
    departments: DepartmentCollection,
    data: Mapping[str, Sequence[str]] = SEED_DATA,
) -> None:
    """Form each department in ``data`` and assign its employees.

    Args:
        departments: The collection to populate.
        data: Mapping of department name to the employee names to assign.

    Raises:
        SeedError: If any department or employee already exists. Seeding is a
            setup step, so a conflict here is a programming error.
    """

    for department_name, employee_names in data.items():
        try:
            departments.create(department_name)
        except ConflictError as e:
            raise SeedError(
                f'Seed data failed to populate on forming department "{department_name}"'
            ) from e

        department = departments.find(department_name)
        for employee_name in employee_names:
            try:
                department.employees.create(employee_name)
            except ConflictError as e:
                raise SeedError(
                    f'Seed data failed to populate on assigning employee "{employee_name}" '
                    f'to department "{department_name}"'
                ) from e

        logger.debug(
            "Seeded department %s with %d employees",
            department.name,
            len(employee_names),
        )
