# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .endpoints import build_endpoints, chat_completions_endpoint, embeddings_endpoint, models_endpoint
from .runner import CompatibilityProber, parse_body
from .shape import validate_shape

__all__ = [
    "CompatibilityProber",
    "build_endpoints",
    "chat_completions_endpoint",
    "embeddings_endpoint",
    "models_endpoint",
    "parse_body",
    "validate_shape",
]
