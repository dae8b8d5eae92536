from hr_ledger.records.store import RecordStore
from hr_ledger.storage.mysql_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, table):
        self._table = table
        self._rows = []
        self.rowcount = 0

    def execute(self, sql, params=()):
        sql = " ".join(sql.split())
        if sql.startswith("SELECT payload"):
            key = params[0]
            self._rows = [{"payload": self._table[key]}] if key in self._table else []
        elif sql.startswith("INSERT INTO kv_store"):
            key, value = params
            self._table[key] = value
        elif sql.startswith("DELETE"):
            self.rowcount = 1 if self._table.pop(params[0], None) is not None else 0
        elif sql.startswith("SELECT store_key"):
            self._rows = [{"store_key": k} for k in sorted(self._table)]

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table):
        self._table = table
        self.commits = 0

    def cursor(self, dictionary=True):
        return FakeCursor(self._table)

    def commit(self):
        self.commits += 1

    def rollback(self):
        pass

    def close(self):
        pass


class FakeFactory:
    def __init__(self):
        self.table = {}

    def connect(self):
        return FakeConnection(self.table)


def test_mysql_store_round_trip():
    factory = FakeFactory()
    store = MySQLKeyValueStore(factory)

    assert store.get("employees_data") is None
    store.set("employees_data", "[]")
    store.set("employees_data", '[{"id": "EMP001", "name": "Ravi"}]')
    assert list(store.keys()) == ["employees_data"]
    assert store.delete("employees_data") is True
    assert store.delete("employees_data") is False


def test_record_store_over_mysql_backend():
    factory = FakeFactory()
    records = RecordStore(MySQLKeyValueStore(factory))
    records.load()
    records.save_all()
    assert len(factory.table) == 6

    factory.table["employees_data"] = '[{"id": "EMP001", "name": "Ravi", "basicSalary": 9000}]'
    state = RecordStore(MySQLKeyValueStore(factory)).load()
    assert state.employees[0].basic_salary == 9000
