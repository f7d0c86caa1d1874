import unittest

from learnhub.models import Progress, UserRole
from tests.api_test_case import ApiTestCase


class TestProgressApi(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.teacher = self.make_user("Teacher One", UserRole.teacher)
        self.student = self.make_user("Student One")
        self.course = self.make_course(self.teacher)
        self.lesson1 = self.make_lesson(self.course, "Alphabet")
        self.lesson2 = self.make_lesson(self.course, "Basic Greetings")
        self.headers = self.auth_headers(self.student)

    def test_requires_token(self):
        res = self.client.get("/progress")
        self.assertEqual(res.status_code, 401)

    def test_rejects_garbage_token(self):
        res = self.client.get("/progress", headers={"Authorization": "Bearer not-a-jwt"})
        self.assertEqual(res.status_code, 401)

    def test_teacher_cannot_track_progress(self):
        res = self.client.post(f"/progress/{self.lesson1.id}", headers=self.auth_headers(self.teacher))
        self.assertEqual(res.status_code, 403)

    def test_start_then_conflict(self):
        res = self.client.post(f"/progress/{self.lesson1.id}", headers=self.headers)
        self.assertEqual(res.status_code, 201)
        body = res.json()
        self.assertEqual(body["lesson_id"], self.lesson1.id)
        self.assertEqual(body["user_id"], self.student.id)
        self.assertFalse(body["completed"])
        self.assertEqual(body["progress_percentage"], 0.0)

        res = self.client.post(f"/progress/{self.lesson1.id}", headers=self.headers)
        self.assertEqual(res.status_code, 409)
        self.assertEqual(self.count(Progress, user_id=self.student.id), 1)

    def test_start_unknown_lesson(self):
        res = self.client.post("/progress/9999", headers=self.headers)
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["detail"], "Lesson not found")

    def test_get_one(self):
        res = self.client.get(f"/progress/{self.lesson1.id}", headers=self.headers)
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["detail"], "No progress found for this lesson")

        self.make_progress(self.student, self.lesson1, progress_percentage=50.0)
        res = self.client.get(f"/progress/{self.lesson1.id}", headers=self.headers)
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["progress_percentage"], 50.0)

    def test_update_percentage(self):
        self.make_progress(self.student, self.lesson1)
        res = self.client.put(f"/progress/{self.lesson1.id}", json={"progress_percentage": 30}, headers=self.headers)
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["message"], "Progress updated")
        self.assertEqual(body["progress"]["progress_percentage"], 30)
        self.assertFalse(body["progress"]["completed"])

        res = self.client.put(f"/progress/{self.lesson1.id}", json={"progress_percentage": 100}, headers=self.headers)
        self.assertTrue(res.json()["progress"]["completed"])
        self.assertIsNotNone(res.json()["progress"]["completed_at"])

    def test_update_percentage_out_of_range(self):
        self.make_progress(self.student, self.lesson1)
        for value in (-1, 150):
            res = self.client.put(f"/progress/{self.lesson1.id}", json={"progress_percentage": value}, headers=self.headers)
            self.assertEqual(res.status_code, 400)
            self.assertEqual(res.json()["detail"], "Invalid progress value")

    def test_update_percentage_without_progress(self):
        res = self.client.put(f"/progress/{self.lesson1.id}", json={"progress_percentage": 10}, headers=self.headers)
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["detail"], "Lesson progress not found")

    def test_complete_list_and_unmark(self):
        res = self.client.post(f"/progress/{self.lesson1.id}/complete", headers=self.headers)
        self.assertEqual(res.status_code, 200)
        self.assertTrue(res.json()["completed"])

        res = self.client.get("/progress", headers=self.headers)
        self.assertEqual(res.status_code, 200)
        completed = res.json()
        self.assertEqual(len(completed), 1)
        self.assertEqual(completed[0]["lesson"], {"id": self.lesson1.id, "title": "Alphabet"})

        res = self.client.delete(f"/progress/{self.lesson1.id}", headers=self.headers)
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["message"], "Lesson unmarked as completed")
        self.assertEqual(self.client.get("/progress", headers=self.headers).json(), [])

    def test_unmark_not_completed(self):
        res = self.client.delete(f"/progress/{self.lesson1.id}", headers=self.headers)
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["detail"], "Lesson is not marked as completed")

    def test_course_summary_scenario(self):
        self.client.post(f"/progress/{self.lesson1.id}/complete", headers=self.headers)
        expected = {
            "course_id": self.course.id,
            "user_id": self.student.id,
            "completed_lessons": 1,
            "total_lessons": 2,
            "progress_percentage": 50.0,
        }

        res = self.client.get(f"/courses/{self.course.id}/progress", headers=self.headers)
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), expected)

        res = self.client.get(f"/progress/{self.course.id}/progress", headers=self.headers)
        self.assertEqual(res.json(), expected)

        res = self.client.get("/progress/courses", headers=self.headers)
        self.assertEqual(res.json(), [expected])

    def test_course_summary_without_lessons(self):
        empty = self.make_course(self.teacher, "Empty")
        res = self.client.get(f"/courses/{empty.id}/progress", headers=self.headers)
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["progress_percentage"], 0)

    def test_course_summary_unknown_course(self):
        res = self.client.get("/courses/9999/progress", headers=self.headers)
        self.assertEqual(res.status_code, 404)


if __name__ == '__main__':
    unittest.main()
