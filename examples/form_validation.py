"""
Form validation: independent fields accumulate errors, dependent checks chain.

Run: python examples/form_validation.py
"""
import re
from dataclasses import dataclass

from validationpy import (
    Success,
    Failure,
    pure,
    curry,
    with_validation,
    dict_union,
    ConsoleLogger,
)

_IP = re.compile(r"^(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})$")


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str
    age: int
    email: str
    ip: str


def not_blank(field):
    return lambda s: Success(s) if s.strip() else Failure([f"The {field} field is empty"])


def length_between(field, lo, hi):
    def check(s):
        if lo <= len(s) <= hi:
            return Success(s)
        return Failure([f"The {field} field must be {lo}-{hi} characters"])
    return check


def parse_age(s):
    if not s.isdigit():
        return Failure(["Invalid age"])
    age = int(s)
    return Success(age) if 0 < age < 150 else Failure(["Invalid age"])


def ip_shape(s):
    m = _IP.match(s)
    if m and all(int(part) <= 255 for part in m.groups()):
        return Success(s)
    return Failure(["Invalid ip"])


def name(field, raw):
    return not_blank(field)(raw).and_then(length_between(field, 2, 40))


def validate(form):
    v = pure(curry(Person))
    v = with_validation(name("first name", form["first_name"]), v)
    v = with_validation(name("last name", form["last_name"]), v)
    v = with_validation(not_blank("age")(form["age"]).and_then(parse_age), v)
    v = with_validation(not_blank("email")(form["email"]), v)
    v = with_validation(ip_shape(form["ip"]), v)
    return v


def validate_keyed(form):
    # Same idea with field-keyed errors merged by dict union
    keyed = lambda key, v: v.map_error(lambda errs: {key: errs[0]})
    v = pure(curry(lambda age, ip: (age, ip)))
    v = with_validation(keyed("age", not_blank("age")(form["age"]).and_then(parse_age)), v, merge=dict_union)
    v = with_validation(keyed("ip", ip_shape(form["ip"])), v, merge=dict_union)
    return v


def main():
    logger = ConsoleLogger(name="form-demo")
    good = {"first_name": "Ada", "last_name": "Lovelace", "age": "36", "email": "ada@example.com", "ip": "10.0.0.1"}
    bad = {"first_name": "Ada", "last_name": " ", "age": "old", "email": "ada@example.com", "ip": "300.1.1"}

    logger.report(validate(good), "person", form="good")
    logger.report(validate(bad), "person", form="bad")
    logger.report(validate_keyed(bad), "keyed", form="bad")


if __name__ == "__main__":
    main()
