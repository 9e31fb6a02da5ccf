from django.test import override_settings
from django.urls import reverse
from rest_framework.test import APITestCase

from niancat.models import Word
from niancat.services import reset_engine

ERIKE_HASH = "d8e7363cdad6303dd4c41cb2ad3e2c35759257ca8ac509107e4e9e9ff5741933"


@override_settings(NIANCAT_MAIN_CHANNEL="C0123", NIANCAT_DICTIONARY_PATH=None)
class PuzzleApiTests(APITestCase):
    def setUp(self):
        for text in ["GALLTJUTA", "DATORSPEL", "SPELDATOR", "ordlista"]:
            Word.objects.create(text=text)
        reset_engine()
        self.addCleanup(reset_engine)

    def _set_puzzle(self, puzzle):
        return self.client.post(reverse("puzzle"), {"channel": "C0", "puzzle": puzzle}, format="json")

    def test_health(self):
        resp = self.client.get(reverse("Health"))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Server is up!"})

    def test_get_puzzle_when_not_set(self):
        resp = self.client.get(reverse("puzzle"), {"channel": "C0"})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["responses"], [{"type": "no_puzzle_set", "channel": "C0"}])
        self.assertEqual(data["messages"][0]["channel"], "C0")

    def test_set_and_get_puzzle(self):
        resp = self._set_puzzle("spdatorel")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json()["responses"],
            [{"type": "set_puzzle", "channel": "C0", "puzzle": "SPDATOREL", "solutions": 2}],
        )

        resp = self.client.get(reverse("puzzle"), {"channel": "C1"})
        data = resp.json()
        self.assertEqual(data["responses"][0]["type"], "get_puzzle")
        self.assertEqual(data["responses"][0]["solutions"], 2)
        self.assertIn("SPD ATO REL", data["messages"][0]["text"])

    def test_set_invalid_puzzle(self):
        resp = self._set_puzzle("ABC")
        self.assertEqual(resp.json()["responses"][0]["reason"], "not_nine_characters")
        resp = self._set_puzzle("AAAAAAAAA")
        self.assertEqual(resp.json()["responses"][0]["reason"], "not_in_dictionary")

    def test_check_solution(self):
        self._set_puzzle("TJUTAGALL")
        resp = self.client.post(
            reverse("check-solution"),
            {"channel": "D0", "name": "erike", "word": "gall-tjuta"},
            format="json",
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(
            data["responses"],
            [
                {"type": "correct_solution", "channel": "D0", "word": "gall-tjuta"},
                {"type": "notification", "name": "erike", "solution_hash": ERIKE_HASH},
            ],
        )
        self.assertEqual([m["channel"] for m in data["messages"]], ["D0", "C0123"])

    def test_non_matching_solution(self):
        self._set_puzzle("GALLTJUTA")
        resp = self.client.post(
            reverse("check-solution"),
            {"channel": "D0", "name": "erike", "word": "GALLTJUTR"},
            format="json",
        )
        self.assertEqual(
            resp.json()["responses"][0]["reason"],
            {"type": "non_matching_word", "puzzle": "GALLTJUTA", "too_many": "R", "too_few": "A"},
        )

    def test_previous_solutions_on_next_set(self):
        self._set_puzzle("SPDATOREL")
        for name in ["erike", "f00ale"]:
            self.client.post(
                reverse("check-solution"),
                {"channel": "D0", "name": name, "word": "DATORSPEL"},
                format="json",
            )
        resp = self._set_puzzle("GALLTJUTA")
        responses = resp.json()["responses"]
        self.assertEqual(len(responses), 2)
        self.assertEqual(
            responses[1],
            {
                "type": "solutions_notification",
                "solutions": {"DATORSPEL": ["erike", "f00ale"], "SPELDATOR": []},
            },
        )

    def test_help(self):
        resp = self.client.get(reverse("help"), {"channel": "C0"})
        self.assertEqual(resp.json()["responses"], [{"type": "help", "channel": "C0"}])
        self.assertIn("!setnian", resp.json()["messages"][0]["text"])

    def test_blank_candidates_reach_the_engine(self):
        resp = self._set_puzzle("")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json()["responses"],
            [{"type": "invalid_puzzle", "channel": "C0", "puzzle": "", "reason": "not_nine_characters"}],
        )

        self._set_puzzle("GALLTJUTA")
        resp = self.client.post(
            reverse("check-solution"), {"channel": "D0", "name": "erike", "word": ""}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json()["responses"],
            [{"type": "incorrect_solution", "channel": "D0", "word": "", "reason": "not_nine_characters"}],
        )

    def test_missing_fields(self):
        resp = self.client.post(reverse("check-solution"), {"channel": "D0"}, format="json")
        self.assertEqual(resp.status_code, 400)
        resp = self.client.get(reverse("puzzle"))
        self.assertEqual(resp.status_code, 400)


@override_settings(NIANCAT_MAIN_CHANNEL="C0123", NIANCAT_DICTIONARY_PATH=None)
class ChatMessageApiTests(APITestCase):
    def setUp(self):
        Word.objects.create(text="GALLTJUTA")
        reset_engine()
        self.addCleanup(reset_engine)

    def _message(self, channel, text, name="erike"):
        return self.client.post(
            reverse("chat-message"), {"channel": channel, "name": name, "text": text}, format="json"
        ).json()

    def test_game_round(self):
        data = self._message("C0", "!setnian TJUTAGALL")
        self.assertEqual(data["responses"][0]["type"], "set_puzzle")

        data = self._message("D0", "GALL TJUTA")
        self.assertEqual([r["type"] for r in data["responses"]], ["correct_solution", "notification"])
        self.assertEqual(data["responses"][1]["solution_hash"], ERIKE_HASH)

    def test_ignored_message(self):
        self.assertEqual(self._message("C0", "hej allihopa"), {"responses": [], "messages": []})

    def test_invalid_command(self):
        data = self._message("D0", "!nosuchcommand")
        self.assertEqual(
            data["responses"],
            [{"type": "invalid_command", "channel": "D0", "text": "!nosuchcommand", "reason": "unknown_command"}],
        )
