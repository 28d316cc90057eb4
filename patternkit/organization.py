"""An organisation chart of departments and employees as one tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence


def indent_string(indent: int) -> str:
    """Return ``indent`` spaces."""
    return " " * max(indent, 0)


def _format_amount(value: float) -> str:
    return f"{value:g}"


class OrgComponent(ABC):
    """A node of the organisation chart."""

    @abstractmethod
    def display_info(self, indent: int = 0) -> None:
        """Print this node, indented by ``indent`` spaces."""

    @abstractmethod
    def salary_budget(self) -> float:
        """Return the total salary of this node."""

    def add(self, component: OrgComponent) -> None:
        """Add a child; leaves ignore this."""

    def remove(self, component: OrgComponent) -> None:
        """Remove a child; leaves ignore this."""


class Employee(OrgComponent):
    """A single person in the organisation."""

    def __init__(self, name: str, position: str, salary: float) -> None:
        self.name = name
        self.position = position
        self.salary = salary

    def display_info(self, indent: int = 0) -> None:
        print(
            f"{indent_string(indent)}Employee: {self.name}, "
            f"Position: {self.position}, Salary: ${_format_amount(self.salary)}"
        )

    def salary_budget(self) -> float:
        return self.salary


class Department(OrgComponent):
    """A named group of employees and sub-departments."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.components: list[OrgComponent] = []

    def __iter__(self) -> Iterator[OrgComponent]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def display_info(self, indent: int = 0) -> None:
        print(f"{indent_string(indent)}Department: {self.name}")
        for component in self.components:
            component.display_info(indent + 4)

    def salary_budget(self) -> float:
        return sum((c.salary_budget() for c in self.components), 0.0)

    def add(self, component: OrgComponent) -> None:
        self.components.append(component)

    def remove(self, component: OrgComponent) -> None:
        self.components = [c for c in self.components if c is not component]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a sample organisation chart and its salary budget."""
    company = Department("Tech Corp")
    ceo = Employee("Alice Johnson", "CEO", 250000)
    cto = Employee("Bob Smith", "CTO", 200000)
    dev1 = Employee("Charlie Davis", "Developer", 90000)
    dev2 = Employee("Dana Lee", "Developer", 95000)
    hr_head = Employee("Eve Carter", "HR Head", 85000)
    hr_assistant = Employee("Frank Brown", "HR Assistant", 45000)

    dev_dept = Department("Development Department")
    hr_dept = Department("Human Resources")
    for member in (dev1, dev2, cto):
        dev_dept.add(member)
    for member in (hr_head, hr_assistant):
        hr_dept.add(member)
    for member in (ceo, dev_dept, hr_dept):
        company.add(member)

    print("Company Organizational Chart:")
    company.display_info()
    print(f"\nTotal salary budget: ${_format_amount(company.salary_budget())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())