"""Webhook handler for GitHub issue-comment events"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from conventions_bot.config import Config
from conventions_bot.core.commands import (
    CommandRule,
    build_vocabulary,
    compose_message,
    match_rule,
)
from conventions_bot.core.exceptions import ServiceConnectionError
from conventions_bot.core.types.events import InboundEvent
from conventions_bot.utils.crypto import SIGNATURE_HEADERS, verify_signature
from conventions_bot.webhooks.exceptions import (
    InvalidSignatureError,
    MalformedPayloadError,
    UnsupportedEventError,
)

SUPPORTED_EVENT = 'issue_comment'
SUPPORTED_ACTION = 'created'


@dataclass
class BotDependencies:
    """Everything the handler needs, built once at startup"""
    config: Config
    github: Any
    rules: Tuple[CommandRule, ...] = ()
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger('conventions_bot.webhooks')
    )

    def __post_init__(self):
        if not self.rules:
            self.rules = build_vocabulary(self.config.enable_stale_commands)


@dataclass
class HandlerResult:
    """Outcome of one webhook delivery"""
    status: str
    intent: Optional[str] = None
    comment_created: bool = False
    issue_closed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'intent': self.intent,
            'comment_created': self.comment_created,
            'issue_closed': self.issue_closed,
        }


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, val in headers.items():
        if key.lower() == lowered:
            return val
    return None


def parse_event(raw_body: bytes, delivery_id: Optional[str] = None) -> InboundEvent:
    """Decode a raw issue_comment payload into an InboundEvent"""
    try:
        payload = json.loads(raw_body)
    except (UnicodeDecodeError, ValueError) as e:
        raise MalformedPayloadError(f"Failed to decode the JSON body: {e}")

    if not isinstance(payload, dict):
        raise MalformedPayloadError("Expected a JSON object")

    repo = payload.get('repository') or payload.get('repo')
    try:
        sender = payload['sender']['login']
        body = payload['comment']['body']
        owner = repo['owner']['login']
        name = repo['name']
        number = payload['issue']['number']
    except (KeyError, TypeError) as e:
        raise MalformedPayloadError(f"Missing field in payload: {e}")

    if not all(isinstance(v, str) for v in (sender, owner, name)):
        raise MalformedPayloadError("sender, owner and repository name must be strings")
    if body is None:
        body = ''
    if not isinstance(body, str):
        raise MalformedPayloadError("comment body must be a string")
    if isinstance(number, bool) or not isinstance(number, int):
        raise MalformedPayloadError("issue number must be an integer")

    action = payload.get('action')
    return InboundEvent(
        sender=sender,
        body=body,
        owner=owner,
        repo=name,
        issue_number=number,
        action=action if isinstance(action, str) else None,
        delivery_id=delivery_id,
    )


class IssueCommentHandler:
    """Closes issues when the authorized moderator comments a command"""

    def __init__(self, deps: BotDependencies):
        self.deps = deps
        self.logger = deps.logger

    def validate_signature(self, headers: Mapping[str, str], request_data: bytes) -> None:
        """Check the HMAC signature over the exact body bytes"""
        secret = self.deps.config.github_webhook_secret
        for name, prefix, digest in SIGNATURE_HEADERS:
            signature = _header(headers, name)
            if signature is None:
                continue
            if not verify_signature(secret, request_data, signature, prefix, digest):
                raise InvalidSignatureError(f"Invalid signature in {name}")
            return
        raise InvalidSignatureError("No signature provided")

    def validate_event_type(self, headers: Mapping[str, str]) -> Optional[str]:
        """Return the event name, rejecting anything but issue_comment and ping"""
        event_type = _header(headers, 'X-GitHub-Event')
        if event_type is not None and event_type not in (SUPPORTED_EVENT, 'ping'):
            raise UnsupportedEventError(f"Unsupported event type: {event_type}")
        return event_type

    def handle(self, headers: Mapping[str, str], request_data: bytes) -> HandlerResult:
        """Run one delivery through verification, decoding and dispatch"""
        self.validate_signature(headers, request_data)
        if self.validate_event_type(headers) == 'ping':
            return HandlerResult(status='pong')

        event = parse_event(request_data, _header(headers, 'X-GitHub-Delivery'))
        if event.action is not None and event.action != SUPPORTED_ACTION:
            raise UnsupportedEventError(f"Ignoring issue_comment {event.action} event")

        return self.dispatch(event)

    def dispatch(self, event: InboundEvent) -> HandlerResult:
        """Act on a decoded event"""
        config = self.deps.config
        if event.sender != config.authorized_login:
            self.logger.debug(
                "Ignoring comment from unauthorized sender",
                extra={'sender': event.sender, 'issue': str(event)}
            )
            return HandlerResult(status='ignored')

        rule = match_rule(event.body, self.deps.rules)
        if rule is None:
            self.logger.debug("No command found", extra={'issue': str(event)})
            return HandlerResult(status='ignored')

        self.logger.info(
            "Closing issue",
            extra={
                'issue': str(event),
                'intent': rule.intent.value,
                'delivery_id': event.delivery_id,
            }
        )
        message = compose_message(rule, config.conventions_url)
        result = HandlerResult(status='processed', intent=rule.intent.value)

        try:
            self.deps.github.create_comment(event.owner, event.repo, event.issue_number, message)
            result.comment_created = True
        except ServiceConnectionError as e:
            self.logger.error("Failed to create a comment", extra={'error': str(e)})

        try:
            self.deps.github.close_issue(event.owner, event.repo, event.issue_number)
            result.issue_closed = True
        except ServiceConnectionError as e:
            self.logger.error("Failed to close the issue", extra={'error': str(e)})

        return result
