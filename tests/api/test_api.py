def _create(client, emp_id="EMP001", **extra):
    body = {"id": emp_id, "name": "Ravi Kumar", "basicSalary": "9000", **extra}
    return client.post("/api/employees", json=body)


def test_employee_crud(client):
    res = _create(client)
    assert res.status_code == 201
    assert res.get_json()["data"]["status"] == "Active"

    res = client.get("/api/employees/emp001")
    assert res.get_json()["data"]["name"] == "Ravi Kumar"

    res = client.post("/api/employees/EMP001/status", json={})
    assert res.get_json()["data"]["status"] == "Inactive"

    res = client.get("/api/employees?status=Active")
    assert res.get_json()["data"] == []

    assert client.delete("/api/employees/EMP001").status_code == 200
    assert client.get("/api/employees/EMP001").status_code == 404


def test_validation_errors_are_400(client):
    res = client.post("/api/employees", json={"id": "", "name": "X"})
    assert res.status_code == 400
    assert res.get_json() == {"success": False, "message": "Employee ID is required"}

    res = client.get("/api/payroll?month=April&year=abc")
    assert res.status_code == 400


def test_attendance_and_payroll_flow(client):
    _create(client)
    for day in (1, 2):
        res = client.post(
            "/api/attendance",
            json={"employeeId": "EMP001", "month": "April", "year": 2025, "day": day, "status": "A"},
        )
        assert res.status_code == 200

    for field, value in (("da", 500), ("ta", 300), ("pf", 200), ("advancePaid", "1000")):
        res = client.post(
            "/api/payroll/field",
            json={"employeeId": "EMP001", "month": "April", "year": 2025, "field": field, "value": value},
        )
        assert res.status_code == 200

    res = client.get("/api/payroll/EMP001?month=April&year=2025")
    data = res.get_json()["data"]
    assert data["attendance"]["absent"] == 2
    assert data["deductibleDays"] == 1
    assert data["netPayable"] == 8300

    res = client.get("/api/attendance/EMP001?month=April&year=2025")
    assert res.get_json()["data"]["summary"]["absent"] == 2


def test_payment_and_reports(client):
    _create(client)
    res = client.post(
        "/api/transactions",
        json={"employeeId": "EMP001", "amount": "2500", "voucherNo": "V-9", "month": "April", "year": 2025, "mode": "UPI"},
    )
    assert res.status_code == 201
    assert res.get_json()["data"]["mode"] == "UPI"

    res = client.post(
        "/api/transactions",
        json={"employeeId": "EMP001", "amount": "10", "voucherNo": "V-10", "mode": "Barter"},
    )
    assert res.status_code == 400

    data = client.get("/api/transactions").get_json()["data"]
    assert data["totalDisbursed"] == 2500

    dashboard = client.get("/api/reports/dashboard").get_json()["data"]
    assert dashboard["totalPaid"] == 2500


def test_billing_endpoints(client):
    res = client.post("/api/billing/gst", json={"items": [{"particulars": "Guarding", "qty": 1, "rate": 1000}]})
    data = res.get_json()["data"]
    assert round(data["totalAmount"], 2) == 1180
    assert data["amountInWords"] == "ONE THOUSAND ONE HUNDRED AND EIGHTY ONLY"

    res = client.post("/api/billing/quotation", json={"salary": 12000})
    assert res.get_json()["data"]["grandTotal"] == 18821


def test_company_profile(client):
    assert client.get("/api/company").get_json()["data"]["name"] == "EXCEL ENTERPRISE SOLUTIONS"
    res = client.put("/api/company", json={"name": "Acme Guards", "locationHeader": "BRANCH"})
    assert res.get_json()["data"]["locationHeader"] == "BRANCH"
    assert client.put("/api/company", json={"fax": "1"}).status_code == 400


def test_holidays(client):
    res = client.post("/api/holidays", json={"date": "2025-08-15", "reason": "Independence Day", "type": "National"})
    assert res.status_code == 201
    assert client.post("/api/holidays", json={"date": "15/08/2025", "reason": "x"}).status_code == 400

    data = client.get("/api/holidays?year=2025").get_json()["data"]
    assert [h["reason"] for h in data] == ["Independence Day"]


def test_views(client):
    data = client.get("/views").get_json()["data"]
    assert data["current"] == "Dashboard"
    assert "QuotationForm" in data["views"]

    res = client.get("/views/Holidays?year=2025&month=May")
    out = res.get_json()["data"]
    assert out["view"] == "Holidays"
    assert out["month"] == "May"

    assert client.get("/views/Nope").status_code == 404


def test_export_download(client):
    _create(client)
    res = client.get("/api/export")
    assert res.status_code == 200
    assert res.mimetype == "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    assert "Force_Management_Data_" in res.headers["Content-Disposition"]
    assert res.data[:2] == b"PK"


def test_views_employee_selection_can_be_cleared(client):
    _create(client)
    out = client.get("/views/EmployeeSummary?employeeId=EMP001").get_json()["data"]
    assert out["employeeId"] == "EMP001"
    out = client.get("/views/EmployeeSummary?employeeId=").get_json()["data"]
    assert out["employeeId"] is None
