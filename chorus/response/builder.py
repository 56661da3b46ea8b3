"""
Fluent response construction.

Handlers get a fresh ResponseBuilder on every HandlerInput. Each mutator
returns the builder so calls can be chained:

    return (
        handler_input.response_builder
        .speak("Welcome back")
        .ask("What would you like to do?")
        .set_simple_card("Welcome", "What would you like to do?")
        .response
    )
"""

from __future__ import annotations

from typing import Any

from chorus.model.request import Intent
from chorus.model.response import (
    Card,
    Directive,
    Image,
    OutputSpeech,
    Reprompt,
    Response,
)

SPEAK_OPEN = "<speak>"
SPEAK_CLOSE = "</speak>"

VIDEO_APP_LAUNCH = "VideoApp.Launch"

# Directive types that hand the session over to a long-running experience.
# While one of them is present the builder leaves should_end_session unset.
SESSION_HOLDING_DIRECTIVES = frozenset({VIDEO_APP_LAUNCH})


def trim_output_speech(speech: str | None) -> str:
    """Strip whitespace and one enclosing ``<speak>`` pair from speech text.

    Args:
        speech: Raw or already-wrapped speech text

    Returns:
        The inner speech text, never None
    """
    if speech is None:
        return ""
    trimmed = speech.strip()
    if trimmed.startswith(SPEAK_OPEN) and trimmed.endswith(SPEAK_CLOSE):
        return trimmed[len(SPEAK_OPEN):-len(SPEAK_CLOSE)].strip()
    return trimmed


def ssml_speech(speech: str | None, play_behavior: str | None = None) -> OutputSpeech:
    """Wrap speech text in a single ``<speak>`` envelope."""
    return OutputSpeech(
        type="SSML",
        ssml=f"{SPEAK_OPEN}{trim_output_speech(speech)}{SPEAK_CLOSE}",
        play_behavior=play_behavior,
    )


class ResponseBuilder:
    """Accumulates response parts and produces an immutable Response.

    Attributes:
        output_speech: Speech to say
        card: Companion-app card
        reprompt: Speech to say if the user does not answer
        directives: Directives in insertion order, or None
        should_end_session: Tri-state end-of-session flag
    """

    def __init__(self) -> None:
        self.output_speech: OutputSpeech | None = None
        self.card: Card | None = None
        self.reprompt: Reprompt | None = None
        self.directives: list[Directive] | None = None
        self.should_end_session: bool | None = None

    @property
    def response(self) -> Response:
        """The response as currently built."""
        return self.build()

    def build(self) -> Response:
        return Response(
            output_speech=self.output_speech,
            card=self.card,
            reprompt=self.reprompt,
            directives=list(self.directives) if self.directives is not None else None,
            should_end_session=self.should_end_session,
        )

    # -- speech ----------------------------------------------------------

    def speak(self, speech: str | None, play_behavior: str | None = None) -> ResponseBuilder:
        """Say the provided speech to the user."""
        self.output_speech = ssml_speech(speech, play_behavior)
        return self

    def ask(self, reprompt: str | None, play_behavior: str | None = None) -> ResponseBuilder:
        """Listen for the user and reprompt with this speech if they stay silent.

        Keeps the session open unless a session-holding directive has
        already been added.
        """
        self.reprompt = Reprompt(output_speech=ssml_speech(reprompt, play_behavior))
        if not self._has_session_holding_directive():
            self.should_end_session = False
        return self

    def set_should_end_session(self, should_end_session: bool | None) -> ResponseBuilder:
        if not self._has_session_holding_directive():
            self.should_end_session = should_end_session
        return self

    # -- cards -----------------------------------------------------------

    def set_card(self, card: Card) -> ResponseBuilder:
        self.card = card
        return self

    def set_simple_card(self, title: str | None = None, content: str | None = None) -> ResponseBuilder:
        return self.set_card(Card(type="Simple", title=title, content=content))

    def set_standard_card(
        self,
        title: str | None = None,
        text: str | None = None,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> ResponseBuilder:
        image = None
        if small_image_url or large_image_url:
            image = Image(small_image_url=small_image_url, large_image_url=large_image_url)
        return self.set_card(Card(type="Standard", title=title, text=text, image=image))

    def set_link_account_card(self) -> ResponseBuilder:
        return self.set_card(Card(type="LinkAccount"))

    def set_ask_for_permissions_consent_card(self, permissions: list[str]) -> ResponseBuilder:
        return self.set_card(Card(type="AskForPermissionsConsent", permissions=list(permissions)))

    # -- directives ------------------------------------------------------

    def add_directive(self, directive: Directive) -> ResponseBuilder:
        """Append a directive, creating the directive list on first use."""
        if self.directives is None:
            self.directives = []
        self.directives.append(directive)
        return self

    def add_hint_directive(self, text: str) -> ResponseBuilder:
        return self.add_directive(
            Directive(type="Hint", hint={"type": "PlainText", "text": text})
        )

    def add_video_app_launch_directive(
        self,
        source: str,
        title: str | None = None,
        subtitle: str | None = None,
    ) -> ResponseBuilder:
        """Play a video. The session lifecycle is left to the video app."""
        metadata = {
            key: value
            for key, value in (("title", title), ("subtitle", subtitle))
            if value is not None
        }
        self.should_end_session = None
        return self.add_directive(
            Directive(
                type=VIDEO_APP_LAUNCH,
                videoItem={"source": source, "metadata": metadata},
            )
        )

    def add_render_template_directive(self, template: dict[str, Any]) -> ResponseBuilder:
        return self.add_directive(Directive(type="Display.RenderTemplate", template=template))

    def add_delegate_directive(self, updated_intent: Intent | None = None) -> ResponseBuilder:
        return self.add_directive(
            Directive(type="Dialog.Delegate", updatedIntent=_dump_intent(updated_intent))
        )

    def add_elicit_slot_directive(
        self, slot_name: str, updated_intent: Intent | None = None
    ) -> ResponseBuilder:
        return self.add_directive(
            Directive(
                type="Dialog.ElicitSlot",
                slotToElicit=slot_name,
                updatedIntent=_dump_intent(updated_intent),
            )
        )

    def add_confirm_slot_directive(
        self, slot_name: str, updated_intent: Intent | None = None
    ) -> ResponseBuilder:
        return self.add_directive(
            Directive(
                type="Dialog.ConfirmSlot",
                slotToConfirm=slot_name,
                updatedIntent=_dump_intent(updated_intent),
            )
        )

    def add_confirm_intent_directive(self, updated_intent: Intent | None = None) -> ResponseBuilder:
        return self.add_directive(
            Directive(type="Dialog.ConfirmIntent", updatedIntent=_dump_intent(updated_intent))
        )

    def add_audio_player_play_directive(
        self,
        play_behavior: str,
        url: str,
        token: str,
        offset_in_milliseconds: int = 0,
        expected_previous_token: str | None = None,
    ) -> ResponseBuilder:
        stream: dict[str, Any] = {
            "url": url,
            "token": token,
            "offsetInMilliseconds": offset_in_milliseconds,
        }
        if expected_previous_token is not None:
            stream["expectedPreviousToken"] = expected_previous_token
        return self.add_directive(
            Directive(
                type="AudioPlayer.Play",
                playBehavior=play_behavior,
                audioItem={"stream": stream},
            )
        )

    def add_audio_player_stop_directive(self) -> ResponseBuilder:
        return self.add_directive(Directive(type="AudioPlayer.Stop"))

    def add_audio_player_clear_queue_directive(self, clear_behavior: str) -> ResponseBuilder:
        return self.add_directive(
            Directive(type="AudioPlayer.ClearQueue", clearBehavior=clear_behavior)
        )

    def _has_session_holding_directive(self) -> bool:
        if not self.directives:
            return False
        return any(d.type in SESSION_HOLDING_DIRECTIVES for d in self.directives)


def _dump_intent(intent: Intent | None) -> dict[str, Any] | None:
    if intent is None:
        return None
    return intent.model_dump(by_alias=True, exclude_none=True)
