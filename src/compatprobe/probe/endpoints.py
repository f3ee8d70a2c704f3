# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Fixed OpenAI-style endpoints exercised by the prober."""

from __future__ import annotations

from ..models import EndpointDescriptor, ProbeTarget

MODELS = "models"
CHAT_COMPLETIONS = "chat"
EMBEDDINGS = "embeddings"

MODELS_PATH = "/models"
CHAT_COMPLETIONS_PATH = "/chat/completions"
EMBEDDINGS_PATH = "/embeddings"

CHAT_PROMPT = "Hello"
CHAT_MAX_TOKENS = 10
EMBEDDINGS_INPUT = ["Hello world"]


def models_endpoint(target: ProbeTarget) -> EndpointDescriptor:
    return EndpointDescriptor(
        key=MODELS,
        name=f"Models endpoint (GET {MODELS_PATH})",
        path=MODELS_PATH,
        method="GET",
        headers=target.auth_headers(),
        requires_credential=True,
    )


def chat_completions_endpoint(target: ProbeTarget) -> EndpointDescriptor:
    return EndpointDescriptor(
        key=CHAT_COMPLETIONS,
        name=f"Chat Completions endpoint (POST {CHAT_COMPLETIONS_PATH})",
        path=CHAT_COMPLETIONS_PATH,
        method="POST",
        payload={
            "model": target.model,
            "messages": [{"role": "user", "content": CHAT_PROMPT}],
            "max_tokens": CHAT_MAX_TOKENS,
        },
        headers=target.auth_headers(),
    )


def embeddings_endpoint(target: ProbeTarget) -> EndpointDescriptor:
    return EndpointDescriptor(
        key=EMBEDDINGS,
        name=f"Embeddings endpoint (POST {EMBEDDINGS_PATH})",
        path=EMBEDDINGS_PATH,
        method="POST",
        payload={"model": target.model, "input": list(EMBEDDINGS_INPUT)},
        headers=target.auth_headers(),
    )


def build_endpoints(target: ProbeTarget) -> list[EndpointDescriptor]:
    """Endpoints in the order they are probed."""
    return [
        models_endpoint(target),
        chat_completions_endpoint(target),
        embeddings_endpoint(target),
    ]


__all__ = [
    "CHAT_COMPLETIONS",
    "CHAT_COMPLETIONS_PATH",
    "EMBEDDINGS",
    "EMBEDDINGS_PATH",
    "MODELS",
    "MODELS_PATH",
    "build_endpoints",
    "chat_completions_endpoint",
    "embeddings_endpoint",
    "models_endpoint",
]
