"""Tests for chorus.response.builder."""

import pytest

from chorus.model import Directive, Intent, Slot
from chorus.response import ResponseBuilder, ssml_speech, trim_output_speech


@pytest.fixture
def builder() -> ResponseBuilder:
    return ResponseBuilder()


class TestSpeech:
    """Speech wrapping in the <speak> envelope."""

    def test_speak_wraps_plain_text(self, builder):
        response = builder.speak("Hello").response
        assert response.output_speech.type == "SSML"
        assert response.output_speech.ssml == "<speak>Hello</speak>"

    def test_speak_is_idempotent_on_wrapped_text(self, builder):
        response = builder.speak("<speak>Hello</speak>").response
        assert response.output_speech.ssml == "<speak>Hello</speak>"

    def test_speak_trims_whitespace(self, builder):
        response = builder.speak("  <speak> Hello </speak>  ").response
        assert response.output_speech.ssml == "<speak>Hello</speak>"

    def test_speak_none_is_empty_envelope(self, builder):
        assert builder.speak(None).response.output_speech.ssml == "<speak></speak>"

    def test_speak_keeps_play_behavior(self, builder):
        speech = builder.speak("Hi", play_behavior="REPLACE_ALL").response.output_speech
        assert speech.play_behavior == "REPLACE_ALL"

    def test_trim_only_strips_complete_envelope(self):
        assert trim_output_speech("<speak>Hello") == "<speak>Hello"

    def test_ssml_speech_matches_builder(self, builder):
        assert builder.speak("Hi").response.output_speech == ssml_speech("Hi")


class TestReprompt:
    """Reprompts and the end-of-session flag."""

    def test_ask_sets_reprompt_and_keeps_session_open(self, builder):
        response = builder.ask("Anything else?").response
        assert response.reprompt.output_speech.ssml == "<speak>Anything else?</speak>"
        assert response.should_end_session is False

    def test_ask_after_video_launch_leaves_flag_unset(self, builder):
        builder.add_video_app_launch_directive("https://example.com/v.mp4", "Title", "Sub")
        response = builder.ask("Anything else?").response
        assert response.reprompt is not None
        assert response.should_end_session is None

    def test_set_should_end_session(self, builder):
        assert builder.set_should_end_session(True).response.should_end_session is True

    def test_set_should_end_session_ignored_after_video_launch(self, builder):
        builder.add_video_app_launch_directive("https://example.com/v.mp4")
        assert builder.set_should_end_session(True).response.should_end_session is None

    def test_video_launch_resets_previous_flag(self, builder):
        builder.set_should_end_session(True)
        builder.add_video_app_launch_directive("https://example.com/v.mp4")
        assert builder.response.should_end_session is None

    def test_other_directives_do_not_hold_session(self, builder):
        builder.add_audio_player_stop_directive()
        assert builder.ask("More?").response.should_end_session is False


class TestCards:
    def test_simple_card(self, builder):
        card = builder.set_simple_card("Title", "Body").response.card
        assert (card.type, card.title, card.content) == ("Simple", "Title", "Body")

    def test_standard_card_with_image(self, builder):
        card = builder.set_standard_card(
            "Title", "Text", small_image_url="https://s", large_image_url="https://l"
        ).response.card
        assert card.type == "Standard"
        assert card.image.small_image_url == "https://s"
        assert card.image.large_image_url == "https://l"

    def test_standard_card_without_image(self, builder):
        assert builder.set_standard_card("Title", "Text").response.card.image is None

    def test_link_account_card(self, builder):
        assert builder.set_link_account_card().response.card.type == "LinkAccount"

    def test_permissions_consent_card(self, builder):
        card = builder.set_ask_for_permissions_consent_card(["read::alexa:device:all:address"]).response.card
        assert card.type == "AskForPermissionsConsent"
        assert card.permissions == ["read::alexa:device:all:address"]


class TestDirectives:
    def test_no_directives_by_default(self, builder):
        assert builder.response.directives is None

    def test_directives_kept_in_order(self, builder):
        builder.add_hint_directive("Try asking for help")
        builder.add_audio_player_stop_directive()
        builder.add_directive(Directive(type="Custom.Thing"))
        types = [d.type for d in builder.response.directives]
        assert types == ["Hint", "AudioPlayer.Stop", "Custom.Thing"]

    def test_elicit_slot_directive_payload(self, builder):
        intent = Intent(name="BookIntent", slots={"city": Slot(name="city")})
        directive = builder.add_elicit_slot_directive("city", intent).response.directives[0]
        dumped = directive.model_dump(by_alias=True, exclude_none=True)
        assert dumped["type"] == "Dialog.ElicitSlot"
        assert dumped["slotToElicit"] == "city"
        assert dumped["updatedIntent"]["name"] == "BookIntent"

    def test_audio_player_play_payload(self, builder):
        directive = builder.add_audio_player_play_directive(
            "REPLACE_ALL", "https://example.com/a.mp3", "token-1", 1000
        ).response.directives[0]
        dumped = directive.model_dump(by_alias=True, exclude_none=True)
        assert dumped["playBehavior"] == "REPLACE_ALL"
        assert dumped["audioItem"]["stream"] == {
            "url": "https://example.com/a.mp3",
            "token": "token-1",
            "offsetInMilliseconds": 1000,
        }

    def test_dialog_directives(self, builder):
        builder.add_delegate_directive()
        builder.add_confirm_slot_directive("city")
        builder.add_confirm_intent_directive()
        builder.add_audio_player_clear_queue_directive("CLEAR_ALL")
        builder.add_render_template_directive({"type": "BodyTemplate1"})
        types = [d.type for d in builder.response.directives]
        assert types == [
            "Dialog.Delegate",
            "Dialog.ConfirmSlot",
            "Dialog.ConfirmIntent",
            "AudioPlayer.ClearQueue",
            "Display.RenderTemplate",
        ]

    def test_built_response_is_a_snapshot(self, builder):
        """Directives added after build do not leak into the earlier response."""
        builder.add_hint_directive("one")
        first = builder.build()
        builder.add_hint_directive("two")
        assert len(first.directives) == 1


def test_chaining_returns_builder(builder):
    assert builder.speak("a").ask("b").set_simple_card("t", "c") is builder
