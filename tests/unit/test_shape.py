# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from compatprobe.probe.shape import NOT_AN_OBJECT_WARNING, validate_shape

VALID_CHAT = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-3.5-turbo",
    "choices": [{"index": 0, "message": {"role": "assistant", "content": "Hi"}, "finish_reason": "stop"}],
    "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
}


def test_valid_chat_completion_has_no_warnings():
    assert validate_shape("chat", VALID_CHAT) == []


def test_chat_completion_missing_fields():
    warnings = validate_shape("chat", {"choices": "nope"})
    assert "missing 'id' field" in warnings
    assert "missing 'object' field" in warnings
    assert "'choices' field is not an array" in warnings
    assert "missing 'usage' field" in warnings
    assert len(warnings) == 4


def test_chat_completion_wrong_object_and_usage_type():
    body = dict(VALID_CHAT, object="text_completion", usage=[1, 2])
    warnings = validate_shape("chat", body)
    assert warnings == [
        "'object' field is 'text_completion', expected 'chat.completion'",
        "'usage' field is not an object",
    ]


def test_models_and_embeddings_require_data_array():
    assert validate_shape("models", {"object": "list", "data": [{"id": "gpt-4"}]}) == []
    assert validate_shape("embeddings", {"data": [{"embedding": [0.1, 0.2]}]}) == []
    assert validate_shape("models", {"object": "list"}) == ["missing 'data' field"]
    assert validate_shape("embeddings", {"data": {"embedding": []}}) == ["'data' field is not an array"]


def test_non_object_bodies_warn_once():
    assert validate_shape("chat", "<html>ok</html>") == [NOT_AN_OBJECT_WARNING]
    assert validate_shape("models", [1, 2, 3]) == [NOT_AN_OBJECT_WARNING]


def test_unknown_probe_name_is_ignored():
    assert validate_shape("moderations", {}) == []
