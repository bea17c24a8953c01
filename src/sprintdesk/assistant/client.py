# src/sprintdesk/assistant/client.py

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable
from typing import Any, Dict, List, Optional

import httpx
import openai
from openai import OpenAI

from .models import AssistantContext, AssistantMode

logger = logging.getLogger(__name__)

_MODE_INSTRUCTIONS = {
    AssistantMode.GENERATE: (
        "Turn the user's prompt into one Kanban task. Reply with the suggested title, "
        "a one-sentence description, the due date and the status, as a short markdown list."
    ),
    AssistantMode.SUMMARIZE: (
        "Write a short stand-up summary (Yesterday / Today / Blockers) for the workspace "
        "using only the tasks listed below."
    ),
    AssistantMode.SUGGEST: (
        "Suggest at most four concrete next steps for the team, based on the tasks listed below."
    ),
}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip()
    if not s:
        return default
    try:
        return float(s)
    except ValueError:
        return default


def _timeouts_from_env() -> dict[str, float]:
    """
    Timeouts are configurable via env so a slow model cannot hang the console.

    Defaults:
    - connect timeout: 5s
    - read timeout: 25s (no data from server)
    - first token timeout: 20s (no content tokens)
    """
    first_token = _env_float("SPRINTDESK_LLM_FIRST_TOKEN_TIMEOUT_SECONDS", 20.0)
    read_timeout = _env_float("SPRINTDESK_LLM_READ_TIMEOUT_SECONDS", 25.0)
    connect_timeout = _env_float("SPRINTDESK_LLM_CONNECT_TIMEOUT_SECONDS", 5.0)

    read_timeout = max(read_timeout, first_token)

    return {
        "first_token": first_token,
        "read": read_timeout,
        "connect": connect_timeout,
    }


def _is_auth_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return True
    return exc.__class__.__name__ in {"UnauthorizedError"}


def _is_rate_limit_error(exc: Exception) -> bool:
    if isinstance(exc, openai.RateLimitError):
        return True
    return exc.__class__.__name__ in {"TooManyRequestsError"}


def _is_connection_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.APIConnectionError, httpx.TimeoutException)):
        return True
    return exc.__class__.__name__ in {"Timeout"}


def _is_not_found_error(exc: Exception) -> bool:
    return isinstance(exc, openai.NotFoundError)


def friendly_assistant_error_message(err: Exception) -> str:
    msg = str(err).strip() or "Assistant error."
    if "API key is not set" in msg:
        return "Assistant is not configured (missing API key). Set SPRINTDESK_OPENROUTER_API_KEY in .env."
    if "model list is empty" in msg:
        return "Assistant is not configured (no models). Set SPRINTDESK_LLM_MODELS in .env."
    if "base URL is not set" in msg:
        return "Assistant is not configured (missing base URL). Set SPRINTDESK_OPENROUTER_BASE_URL in .env."
    return msg


def _close_stream(stream: Any) -> None:
    close = getattr(stream, "close", None)
    if callable(close):
        try:
            close()
        except Exception:
            logger.debug("Stream close failed.", exc_info=True)


def build_system_prompt(mode: AssistantMode, context: AssistantContext) -> str:
    lines = [
        "You are the project assistant of a Kanban board.",
        _MODE_INSTRUCTIONS[mode],
        "",
        f"Workspace: {context.workspace_name or context.workspace_id}",
        "Completed tasks: " + (", ".join(context.completed_titles) or "none"),
        "In-progress tasks: " + (", ".join(context.in_progress_titles) or "none"),
    ]
    if context.draft is not None:
        lines.append(
            f"Draft task: title={context.draft.title!r} due={context.draft.due_date} "
            f"status={context.draft.status}"
        )
    return "\n".join(lines)


class OpenRouterAssistantClient:
    """
    OpenAI-compatible streaming client (OpenRouter by default).

    Behavior:
    - Tries models in the configured order.
    - If a model produces no first content token within the first-token timeout,
      we abort and try the next model.
    - 404 (model not available) -> remember for an hour, try next.
    - Rate limit / network issues -> try next.
    - Auth issues -> fail fast.
    """

    def __init__(self, settings: Any) -> None:
        api_key = getattr(settings, "openrouter_api_key", None)
        base_url = str(getattr(settings, "openrouter_base_url", "") or "")

        if not api_key or not str(api_key).strip():
            raise RuntimeError("Assistant API key is not set. Set SPRINTDESK_OPENROUTER_API_KEY in your .env.")
        if not base_url.strip():
            raise RuntimeError("Assistant base URL is not set. Set SPRINTDESK_OPENROUTER_BASE_URL in your .env.")

        self._models: List[str] = [m.strip() for m in (getattr(settings, "llm_models", []) or []) if m.strip()]
        self._headers: Dict[str, str] = dict(getattr(settings, "extra_headers", {}) or {})
        self._bad_models: dict[str, float] = {}  # model -> retry_at (monotonic)

        t = _timeouts_from_env()
        self._first_token_timeout = float(t["first_token"])
        self._timeout = httpx.Timeout(connect=t["connect"], read=t["read"], write=10.0, pool=t["connect"])

        # No automatic retries: falling through to the next model is faster.
        self._client = OpenAI(
            base_url=base_url,
            api_key=str(api_key),
            timeout=self._timeout,
            max_retries=0,
        )

    def stream_reply(self, mode: str, prompt: str, context: AssistantContext) -> Iterable[str]:
        if not self._models:
            raise RuntimeError("Assistant model list is empty. Set SPRINTDESK_LLM_MODELS in your .env.")

        system_prompt = build_system_prompt(AssistantMode(mode), context)
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": prompt},
        ]

        last_error: Optional[Exception] = None
        now = time.monotonic()

        for model in self._models:
            retry_at = self._bad_models.get(model)
            if retry_at is not None and retry_at > now:
                continue

            logger.info("Assistant: trying model=%s mode=%s", model, mode)
            t0 = time.monotonic()
            deadline = t0 + self._first_token_timeout

            stream = None
            used_any = False

            try:
                stream = self._client.chat.completions.create(
                    model=model,
                    stream=True,
                    extra_headers=self._headers or None,
                    messages=messages,
                    timeout=self._timeout,
                )

                for chunk in stream:
                    if not used_any and time.monotonic() > deadline:
                        last_error = TimeoutError(f"First token timeout on model: {model}")
                        logger.info("Assistant: first token timeout on model=%s -> trying next", model)
                        break

                    content = None
                    if chunk.choices:
                        delta = getattr(chunk.choices[0], "delta", None)
                        content = getattr(delta, "content", None) if delta is not None else None

                    if content:
                        if not used_any:
                            logger.info("Assistant: first token from model=%s (%.2fs)", model, time.monotonic() - t0)
                        used_any = True
                        yield content

                if used_any:
                    return

                if last_error is None:
                    last_error = RuntimeError(f"Model returned no content: {model}")

            except Exception as e:
                last_error = e

                if _is_auth_error(e):
                    raise RuntimeError(
                        "Assistant authentication failed. Check SPRINTDESK_OPENROUTER_API_KEY."
                    ) from e

                if _is_not_found_error(e):
                    self._bad_models[model] = time.monotonic() + 3600.0
                    logger.info("Assistant: model not available (404): %s", model)
                    continue

                if _is_rate_limit_error(e):
                    logger.info("Assistant: rate-limited on model=%s, trying next", model)
                    continue

                if _is_connection_error(e):
                    logger.info("Assistant: network/timeout error on model=%s, trying next", model)
                    continue

                logger.info("Assistant: error on model=%s (%s), trying next", model, e.__class__.__name__)
                continue

            finally:
                if stream is not None:
                    _close_stream(stream)

        if last_error is not None:
            if _is_rate_limit_error(last_error):
                raise RuntimeError("Assistant is rate-limited. Try again later.") from last_error
            if _is_connection_error(last_error):
                raise RuntimeError("Assistant network/timeout error. Try again later.") from last_error
            raise RuntimeError("All assistant models failed.") from last_error

        raise RuntimeError("All assistant models failed.")
