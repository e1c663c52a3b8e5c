import unittest
from fastapi.testclient import TestClient
from main import app, default_settings, get_transformer, MAX_QUERY_LENGTH
from stopwords import STANDARD_STOP_WORDS

class TestTransformApi(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("time", response.json())

    def test_post_default_settings(self):
        response = self.client.post("/transform", json={"query": "-abc def"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["condition"], "FORMSOF(INFLECTIONAL, def) AND NOT FORMSOF(INFLECTIONAL, abc)")
        self.assertFalse(body["empty"])
        self.assertTrue(body["settings"]["add_standard_stop_words"])

    def test_post_custom_settings(self):
        response = self.client.post("/transform", json={
            "query": "abc def",
            "settings": {"default_conjunction": "or", "use_inflectional_search": False}
        })
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["condition"], '"abc" OR "def"')

    def test_get_empty_result(self):
        response = self.client.get("/transform", params={"q": "NOT term1"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["condition"], "")
        self.assertTrue(response.json()["empty"])

    def test_query_too_long(self):
        response = self.client.get("/transform", params={"q": "a" * (MAX_QUERY_LENGTH + 1)})
        self.assertEqual(response.status_code, 400)

    def test_invalid_settings(self):
        response = self.client.post("/transform", json={"query": "abc", "settings": {"default_conjunction": "near"}})
        self.assertEqual(response.status_code, 422)

    def test_long_query_under_limit(self):
        q = " ".join(["xy"] * 666)
        self.assertLessEqual(len(q), MAX_QUERY_LENGTH)
        response = self.client.get("/transform", params={"q": q})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["condition"].count("FORMSOF(INFLECTIONAL, xy)"), 666)

    def test_stop_words(self):
        response = self.client.get("/stopwords")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["total"], len(STANDARD_STOP_WORDS))

    def test_stop_words_reflect_transformer(self):
        stop_words = get_transformer(default_settings).stop_words
        stop_words.add("gizmo")
        try:
            body = self.client.get("/stopwords").json()
            self.assertIn("gizmo", body["stop_words"])
            self.assertEqual(body["total"], len(STANDARD_STOP_WORDS) + 1)
            self.assertEqual(self.client.get("/transform", params={"q": "gizmo"}).json()["condition"], "")
        finally:
            stop_words.discard("gizmo")

if __name__ == '__main__':
    unittest.main()
