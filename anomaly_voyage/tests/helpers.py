"""Row builders shared by the tests."""


def make_passenger(passenger_id, **overrides):
    """A raw passenger row with source headers."""
    row = {
        "PassengerId": passenger_id,
        "Survived": 0,
        "Pclass": 3,
        "Name": f"Doe, Mr. John {passenger_id}",
        "Sex": "male",
        "Age": 30.0,
        "SibSp": 0,
        "Parch": 0,
        "Ticket": f"T{passenger_id}",
        "Fare": 33.0,
        "Cabin": None,
        "Embarked": "S",
    }
    row.update(overrides)
    return row
