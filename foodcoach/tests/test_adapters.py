import json
import unittest

import httpx

from foodcoach.ai.anthropic_provider import AnthropicProvider
from foodcoach.ai.errors import ChatGenerationError, ResponseParseError
from foodcoach.ai.gemini_provider import GeminiProvider
from foodcoach.ai.openai_provider import OpenAIProvider
from foodcoach.ai.providers import ProviderContext
from foodcoach.ai.schemas import LAB_RESULT_SCHEMA, RECIPES_SCHEMA
from foodcoach.domain.ChatTurn import ChatTurn
from foodcoach.domain.LabResult import LabResult
from foodcoach.tests.fakes import (
    FakeGeminiClient,
    FakeOpenAIClient,
    LAB_JSON,
    RECIPE_JSON,
    RecordingAnthropicTransport,
    make_context,
)
from foodcoach.utilities.constants import SYSTEM_INSTRUCTION

TURNS = [
    ChatTurn(role="user", text="My LDL is high."),
    ChatTurn(role="assistant", text="Let's look at fiber."),
    ChatTurn(role="user", text="What should I eat?"),
]


class TestOpenAIProvider(unittest.TestCase):

    def _provider(self, client):
        ctx, _ = make_context({"OPENAI_API_KEY": "sk-1"}, openai=client)
        return OpenAIProvider(ctx)

    def test_chat_attaches_system_instruction(self):
        client = FakeOpenAIClient(content="  Eat oats.  ")
        reply = self._provider(client).chat(TURNS)
        self.assertEqual(reply, "Eat oats.")
        messages = client.calls[0]["messages"]
        self.assertEqual(messages[0], {"role": "system", "content": SYSTEM_INSTRUCTION})
        self.assertEqual([m["role"] for m in messages[1:]], ["user", "assistant", "user"])
        self.assertEqual(messages[-1]["content"], "What should I eat?")

    def test_chat_failure_becomes_chat_generation_error(self):
        cause = RuntimeError("connection reset")
        with self.assertRaises(ChatGenerationError) as ctx:
            self._provider(FakeOpenAIClient(error=cause)).chat(TURNS)
        self.assertIs(ctx.exception.__cause__, cause)

    def test_analyze_requests_json_mode(self):
        client = FakeOpenAIClient(content=json.dumps(LAB_JSON))
        lab = self._provider(client).analyze_lab_results("LDL 165 mg/dL")
        call = client.calls[0]
        self.assertEqual(call["response_format"], {"type": "json_object"})
        self.assertIn("LDL 165 mg/dL", call["messages"][1]["content"])
        self.assertIn('"markers"', call["messages"][0]["content"])
        self.assertEqual([m.name for m in lab.markers], ["LDL Cholesterol", "Vitamin D"])
        self.assertEqual(lab.markers[0].optimal_range, "< 100 mg/dL")

    def test_analyze_extracts_json_from_commentary(self):
        client = FakeOpenAIClient(content='Sure! ```json\n{"markers":[]}\n```')
        lab = self._provider(client).analyze_lab_results("text")
        self.assertEqual(lab.markers, ())

    def test_analyze_undecodable_output_raises_parse_error(self):
        client = FakeOpenAIClient(content="I'm sorry, I can't read this report.")
        with self.assertRaises(ResponseParseError):
            self._provider(client).analyze_lab_results("text")

    def test_analyze_bad_status_raises_parse_error(self):
        bad = {"markers": [{"name": "LDL", "value": 1, "unit": "x", "status": "critical"}]}
        with self.assertRaises(ResponseParseError):
            self._provider(FakeOpenAIClient(content=json.dumps(bad))).analyze_lab_results("text")

    def test_analyze_transport_error_propagates_unchanged(self):
        cause = RuntimeError("503 from upstream")
        with self.assertRaises(RuntimeError) as ctx:
            self._provider(FakeOpenAIClient(error=cause)).analyze_lab_results("text")
        self.assertIs(ctx.exception, cause)

    def test_recipes_unwraps_recipes_key(self):
        client = FakeOpenAIClient(content=json.dumps({"recipes": [RECIPE_JSON]}))
        recipes = self._provider(client).get_personalized_recipes(LabResult.from_dict(LAB_JSON))
        self.assertEqual(len(recipes), 1)
        self.assertEqual(recipes[0].title, "Oat & Berry Bowl")
        self.assertEqual(recipes[0].prep_time, "10 min")
        prompt = client.calls[0]["messages"][1]["content"]
        self.assertIn("generate 3 personalized recipes", prompt)
        self.assertIn("LDL Cholesterol", prompt)

    def test_analyze_skips_bracketed_citation(self):
        client = FakeOpenAIClient(content='Per guideline [1], result: ' + json.dumps(LAB_JSON))
        lab = self._provider(client).analyze_lab_results("text")
        self.assertEqual(lab.id, "lab_1")
        self.assertEqual(len(lab.markers), 2)

    def test_analyze_unit_suffixed_value(self):
        marker = dict(LAB_JSON["markers"][0], name="HbA1c", value="5.8%", unit="%")
        client = FakeOpenAIClient(content=json.dumps({"markers": [marker]}))
        lab = self._provider(client).analyze_lab_results("HbA1c: 5.8%")
        self.assertEqual(lab.markers[0].value, 5.8)

    def test_recipes_unknown_shape_is_empty(self):
        client = FakeOpenAIClient(content='{"foo": 1}')
        self.assertEqual(self._provider(client).get_personalized_recipes(LabResult()), [])


class TestAnthropicProvider(unittest.TestCase):

    def _provider(self, transport):
        ctx, _ = make_context({"ANTHROPIC_API_KEY": "a-1"}, anthropic=transport.client())
        return AnthropicProvider(ctx)

    def test_chat_posts_messages_request(self):
        transport = RecordingAnthropicTransport(text="Try lentils.")
        reply = self._provider(transport).chat(TURNS)
        self.assertEqual(reply, "Try lentils.")
        request = transport.requests[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(request.url.path, "/v1/messages")
        payload = transport.payload()
        self.assertEqual(payload["system"], SYSTEM_INSTRUCTION)
        self.assertEqual(payload["messages"][1], {"role": "assistant", "content": "Let's look at fiber."})
        self.assertIn("max_tokens", payload)

    def test_empty_history_sends_greeting(self):
        transport = RecordingAnthropicTransport(text="Hi!")
        self._provider(transport).chat([])
        self.assertEqual(transport.payload()["messages"], [{"role": "user", "content": "Hello"}])

    def test_chat_http_error_becomes_chat_generation_error(self):
        transport = RecordingAnthropicTransport(status_code=500)
        with self.assertRaises(ChatGenerationError) as ctx:
            self._provider(transport).chat(TURNS)
        self.assertIsInstance(ctx.exception.__cause__, httpx.HTTPStatusError)

    def test_analyze_with_wrapped_json(self):
        text = "Here is the analysis you asked for:\n" + json.dumps(LAB_JSON) + "\nLet me know!"
        transport = RecordingAnthropicTransport(text=text)
        lab = self._provider(transport).analyze_lab_results("report")
        self.assertEqual(lab.date, "2024-05-15")
        self.assertEqual(lab.markers[1].status, "low")
        self.assertIn('"optimalRange"', transport.payload()["system"])

    def test_analyze_http_error_propagates(self):
        transport = RecordingAnthropicTransport(status_code=529)
        with self.assertRaises(httpx.HTTPStatusError):
            self._provider(transport).analyze_lab_results("report")

    def test_recipes_bare_array(self):
        transport = RecordingAnthropicTransport(text=json.dumps([RECIPE_JSON, dict(RECIPE_JSON, id="r2")]))
        recipes = self._provider(transport).get_personalized_recipes(LabResult())
        self.assertEqual([r.id for r in recipes], ["r1", "r2"])

    def test_recipes_list_key(self):
        transport = RecordingAnthropicTransport(text=json.dumps({"list": [RECIPE_JSON]}))
        recipes = self._provider(transport).get_personalized_recipes(LabResult())
        self.assertEqual(len(recipes), 1)

    def test_recipes_skip_bracketed_citation(self):
        transport = RecordingAnthropicTransport(text="Based on marker [1]: " + json.dumps([RECIPE_JSON]))
        recipes = self._provider(transport).get_personalized_recipes(LabResult())
        self.assertEqual([r.title for r in recipes], ["Oat & Berry Bowl"])

    def test_recipes_wrapped_after_citation(self):
        text = "See [2] and [3].\n" + json.dumps({"recipes": [RECIPE_JSON]})
        recipes = self._provider(RecordingAnthropicTransport(text=text)).get_personalized_recipes(LabResult())
        self.assertEqual(len(recipes), 1)

    def test_client_carries_credentials(self):
        provider = AnthropicProvider(ProviderContext(env={}))
        client = provider.create_client("a-secret")
        try:
            self.assertEqual(client.headers["x-api-key"], "a-secret")
            self.assertIn("anthropic-version", client.headers)
        finally:
            client.close()


class TestGeminiProvider(unittest.TestCase):

    def _provider(self, client):
        ctx, _ = make_context({"GEMINI_API_KEY": "g-1"}, gemini=client)
        return GeminiProvider(ctx)

    def test_chat_maps_assistant_to_model(self):
        client = FakeGeminiClient(text="Add leafy greens.")
        reply = self._provider(client).chat(TURNS)
        self.assertEqual(reply, "Add leafy greens.")
        call = client.calls[0]
        self.assertEqual([c.role for c in call["contents"]], ["user", "model", "user"])
        self.assertEqual(call["contents"][0].parts[0].text, "My LDL is high.")
        self.assertEqual(call["config"].system_instruction, SYSTEM_INSTRUCTION)

    def test_analyze_sends_response_schema(self):
        client = FakeGeminiClient(text=json.dumps(LAB_JSON))
        lab = self._provider(client).analyze_lab_results("report")
        config = client.calls[0]["config"]
        self.assertEqual(config.response_mime_type, "application/json")
        self.assertIsNotNone(config.response_schema)
        self.assertEqual(len(lab.markers), 2)

    def test_recipes_bare_array(self):
        client = FakeGeminiClient(text=json.dumps([RECIPE_JSON]))
        recipes = self._provider(client).get_personalized_recipes(LabResult.from_dict(LAB_JSON))
        self.assertEqual(recipes[0].benefits, ("Beta-glucan lowers LDL",))

    def test_recipes_empty_output_raises_parse_error(self):
        with self.assertRaises(ResponseParseError):
            self._provider(FakeGeminiClient(text=None)).get_personalized_recipes(LabResult())

    def test_schemas_cover_required_fields(self):
        self.assertIn("markers", LAB_RESULT_SCHEMA["required"])
        self.assertEqual(RECIPES_SCHEMA["type"], "ARRAY")


if __name__ == '__main__':
    unittest.main()
