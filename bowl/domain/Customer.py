"""Customer domain entity, identified by name and date of birth."""


class Customer:
    def __init__(self, id: str = "", name: str = "", date_of_birth: str = ""):
        self.id = id
        self.name = name
        self.date_of_birth = date_of_birth

    def matches(self, name: str, date_of_birth: str) -> bool:
        return self.name == name.strip() and self.date_of_birth == date_of_birth

    def __str__(self) -> str:
        return f"{self.name} ({self.date_of_birth})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Customer(str(d.get("id") or ""), d.get("name") or "", d.get("date_of_birth") or "")

    def to_dict(self):
        return {"id": self.id, "name": self.name, "date_of_birth": self.date_of_birth}
