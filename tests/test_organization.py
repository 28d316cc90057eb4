import pytest

from patternkit import organization
from patternkit.organization import Department, Employee, OrgComponent, indent_string


def test_indent_string():
    assert indent_string(0) == ""
    assert indent_string(4) == " " * 4


def test_org_component_is_abstract():
    with pytest.raises(TypeError):
        OrgComponent()


def test_employee_budget_is_salary():
    assert Employee("Dana Lee", "Developer", 95000).salary_budget() == 95000


def test_employee_add_is_ignored():
    emp = Employee("A", "B", 1)
    emp.add(Employee("C", "D", 2))
    assert emp.salary_budget() == 1


def test_employee_display(capsys):
    Employee("Alice Johnson", "CEO", 250000).display_info(2)
    assert capsys.readouterr().out == "  Employee: Alice Johnson, Position: CEO, Salary: $250000\n"


def test_empty_department_budget():
    assert Department("Empty").salary_budget() == 0


def test_department_budget_is_sum_of_members():
    salaries = [90000, 95000, 200000]
    dept = Department("Dev")
    for i, s in enumerate(salaries):
        dept.add(Employee(f"E{i}", "Developer", s))
    assert dept.salary_budget() == sum(salaries)


def test_nested_budget_equals_children_total():
    inner = Department("Inner")
    inner.add(Employee("A", "X", 85000))
    outer = Department("Outer")
    outer.add(Employee("B", "Y", 45000))
    outer.add(inner)
    assert outer.salary_budget() == inner.salary_budget() + 45000


def test_remove_drops_every_occurrence():
    dept = Department("D")
    emp = Employee("A", "X", 10)
    other = Employee("B", "Y", 20)
    dept.add(emp)
    dept.add(other)
    dept.add(emp)
    dept.remove(emp)
    assert list(dept) == [other]


def test_remove_missing_is_harmless():
    dept = Department("D")
    emp = Employee("A", "X", 10)
    dept.add(emp)
    dept.remove(Employee("A", "X", 10))
    assert len(dept) == 1


def test_department_display_indents_children(capsys):
    dept = Department("Human Resources")
    dept.add(Employee("Eve Carter", "HR Head", 85000))
    dept.display_info()
    assert capsys.readouterr().out.splitlines() == [
        "Department: Human Resources",
        "    Employee: Eve Carter, Position: HR Head, Salary: $85000",
    ]


def test_main_output(capsys):
    assert organization.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Company Organizational Chart:"
    assert lines[1] == "Department: Tech Corp"
    assert lines[2] == "    Employee: Alice Johnson, Position: CEO, Salary: $250000"
    assert lines[3] == "    Department: Development Department"
    assert lines[4] == "        Employee: Charlie Davis, Position: Developer, Salary: $90000"
    assert lines[-2] == ""
    assert lines[-1] == "Total salary budget: $765000"