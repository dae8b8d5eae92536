from hr_ledger.attendance.aggregator import find_record, summarize_attendance, summarize_record
from hr_ledger.attendance.model import AttendanceRecord


def _record(days, employee_id="EMP001", month="April", year=2025):
    return AttendanceRecord(employee_id=employee_id, month=month, year=year, days=days)


def test_no_record_is_all_zero():
    s = summarize_attendance("EMP001", "April", 2025, [])
    assert (s.present, s.absent, s.half_day, s.leave, s.holiday, s.off) == (0, 0, 0, 0, 0, 0)
    assert s.total_working == 0


def test_counts_each_status_once():
    rec = _record({1: "P", 2: "P", 3: "A", 4: "HD", 5: "L", 6: "OFF", 7: "H", 8: ""})
    s = summarize_record(rec)
    assert s.present == 2
    assert s.absent == 1
    assert s.half_day == 1
    assert s.leave == 1
    assert s.off == 1
    assert s.holiday == 1
    assert s.total_marked == 7


def test_unrecognized_statuses_are_ignored():
    s = summarize_record(_record({1: "P", 2: "X", 3: "present", 4: "A"}))
    assert s.total_marked == 2


def test_total_working_formula():
    s = summarize_record(_record({1: "HD", 2: "HD", 3: "HD"}))
    assert s.total_working == 1.5

    s = summarize_record(_record({1: "P", 2: "HD", 3: "L", 4: "H", 5: "OFF", 6: "A"}))
    assert s.total_working == 1 + 0.5 + 1 + 1 + 1


def test_lookup_matches_employee_month_and_year():
    records = [
        _record({1: "P"}, year=2024),
        _record({1: "A"}, month="May"),
        _record({1: "HD"}, employee_id="EMP002"),
        _record({1: "L"}),
    ]
    assert find_record("EMP001", "April", 2025, records).days == {1: "L"}
    assert summarize_attendance("EMP001", "April", 2025, records).leave == 1
    assert find_record("EMP003", "April", 2025, records) is None
