"""
test_routers_alumnos.py - Tests for the students & enrollments endpoints

Called by: pytest
Depends on: crudlab/routers/alumnos.py, conftest.py
"""


class TestStudents:
    def test_create_and_get(self, alumnos_client):
        resp = alumnos_client.post("/alumnos", json={
            "nombre": "Lucía", "email": "lucia@example.com", "fecha_nacimiento": "2001-07-15",
        })
        assert resp.status_code == 200
        new_id = resp.json()["id"]
        data = alumnos_client.get(f"/alumnos/{new_id}").json()
        assert data["fecha_nacimiento"] == "2001-07-15"
        assert data["cursadas"] == []

    def test_create_collects_every_error(self, alumnos_client):
        resp = alumnos_client.post("/alumnos", json={"nombre": "", "email": "nope"})
        assert resp.status_code == 409
        assert resp.json()["errores"] == [
            'El campo "nombre" no puede estar vacío',
            'El campo "email" debe ser un email válido',
            'El campo "fecha_nacimiento" no puede ser nulo',
        ]
        assert alumnos_client.get("/alumnos").json() == []

    def test_list_without_enrollments(self, alumnos_client, test_student):
        data = alumnos_client.get("/alumnos").json()
        assert [s["nombre"] for s in data] == ["Nahuel"]
        assert "cursadas" not in data[0]

    def test_get_includes_enrollments(self, alumnos_client, test_student):
        data = alumnos_client.get(f"/alumnos/{test_student.id}").json()
        assert len(data["cursadas"]) == 1
        assert data["cursadas"][0]["aprobada"] is None

    def test_get_missing(self, alumnos_client):
        resp = alumnos_client.get("/alumnos/31")
        assert resp.status_code == 404
        assert resp.json()["error"] == "No se encontró el alumno con ID 31."

    def test_patch(self, alumnos_client, test_student):
        resp = alumnos_client.patch(f"/alumnos/{test_student.id}", json={"email": "nahuel@uni.edu"})
        assert resp.json() == {"id": test_student.id}
        data = alumnos_client.get(f"/alumnos/{test_student.id}").json()
        assert data["email"] == "nahuel@uni.edu"
        assert data["nombre"] == "Nahuel"

    def test_patch_keeps_email_case(self, alumnos_client, test_student):
        alumnos_client.patch(f"/alumnos/{test_student.id}", json={"email": "Foo@Bar.com"})
        assert alumnos_client.get(f"/alumnos/{test_student.id}").json()["email"] == "Foo@Bar.com"


    def test_patch_missing(self, alumnos_client):
        assert alumnos_client.patch("/alumnos/9", json={"nombre": "X"}).status_code == 404

    def test_delete_twice(self, alumnos_client, test_student):
        assert alumnos_client.delete(f"/alumnos/{test_student.id}").json() == "ok"
        assert alumnos_client.delete(f"/alumnos/{test_student.id}").status_code == 404


class TestEnrollments:
    def test_enroll_starts_unset_even_if_body_says_otherwise(self, alumnos_client, test_student):
        resp = alumnos_client.post(f"/alumnos/{test_student.id}/cursada", json={
            "materia": "Algoritmos", "anio": 2020, "cuatrimestre": 2, "aprobada": True,
        })
        assert resp.status_code == 200
        enrollment = alumnos_client.get(f"/cursada/{resp.json()['id']}").json()
        assert enrollment["aprobada"] is None
        assert enrollment["alumno_id"] == test_student.id

    def test_enroll_invalid_term(self, alumnos_client, test_student):
        resp = alumnos_client.post(f"/alumnos/{test_student.id}/cursada", json={
            "materia": "Algoritmos", "anio": 2020, "cuatrimestre": 3,
        })
        assert resp.status_code == 409
        assert resp.json()["errores"] == ['El campo "cuatrimestre" debe estar entre 1 y 2']

    def test_enroll_missing_student(self, alumnos_client):
        resp = alumnos_client.post("/alumnos/77/cursada", json={"materia": "M", "anio": 2020, "cuatrimestre": 1})
        assert resp.status_code == 404

    def test_approve_then_reject(self, alumnos_client, test_enrollment):
        resp = alumnos_client.patch(f"/cursada/aprobar/{test_enrollment.id}")
        assert resp.status_code == 200
        assert resp.json() == {"id": test_enrollment.id}
        assert alumnos_client.get(f"/cursada/{test_enrollment.id}").json()["aprobada"] is True

        alumnos_client.patch(f"/cursada/reprobar/{test_enrollment.id}")
        assert alumnos_client.get(f"/cursada/{test_enrollment.id}").json()["aprobada"] is False

    def test_transition_missing(self, alumnos_client):
        for path in ("/cursada/aprobar/500", "/cursada/reprobar/500"):
            resp = alumnos_client.patch(path)
            assert resp.status_code == 404
            assert resp.json()["error"] == "No se encontró la cursada con ID 500."

    def test_delete_enrollment(self, alumnos_client, test_enrollment):
        assert alumnos_client.delete(f"/cursada/{test_enrollment.id}").json() == "ok"
        assert alumnos_client.delete(f"/cursada/{test_enrollment.id}").status_code == 404
