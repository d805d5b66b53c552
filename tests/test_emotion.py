import pytest

from moviebot.emotion import EMOTION_COLOR, EMOTION_EMOJI, LEXICONS, detect_emotion, emotion_badge
from moviebot.schemas import Emotion


def test_empty_message_is_neutral():
    result = detect_emotion("")
    assert result.emotion == Emotion.NEUTRAL
    assert result.confidence == 1.0
    assert result.matched_keywords == []


def test_no_signal_is_neutral():
    result = detect_emotion("asdkjasdkj random gibberish")
    assert result.emotion == Emotion.NEUTRAL
    assert result.confidence == 1.0


def test_frustration_beats_exclamation_bonus():
    result = detect_emotion("This is so frustrating, nothing works!")
    assert result.emotion == Emotion.FRUSTRATED
    assert result.matched_keywords == ["frustrating", "nothing works"]
    assert result.confidence == pytest.approx(0.5)


def test_question_mark_adds_to_confused():
    result = detect_emotion("What are the ticket prices?")
    assert result.emotion == Emotion.CONFUSED
    assert result.matched_keywords == ["what"]
    assert result.confidence == pytest.approx(0.3)


def test_bare_question_mark():
    result = detect_emotion("?")
    assert result.emotion == Emotion.CONFUSED
    assert result.confidence == pytest.approx(0.1)
    assert result.matched_keywords == []


def test_bare_exclamation_tie_goes_to_angry():
    result = detect_emotion("!")
    assert result.emotion == Emotion.ANGRY
    assert result.confidence == pytest.approx(0.05)


def test_keyword_tie_goes_to_earlier_emotion():
    assert detect_emotion("sad and happy").emotion == Emotion.HAPPY


def test_keywords_and_phrases_accumulate():
    result = detect_emotion("Thank you so much, this is awesome 😊")
    assert result.emotion == Emotion.HAPPY
    assert result.matched_keywords == ["awesome", "thank", "😊", "thank you"]
    assert result.confidence == pytest.approx(0.9)


def test_confidence_is_capped():
    result = detect_emotion("I hate this, it's ridiculous and unacceptable, the worst, I'm furious and angry!")
    assert result.emotion == Emotion.ANGRY
    assert result.confidence == 1.0


def test_custom_divisor():
    result = detect_emotion("What are the ticket prices?", divisor=3)
    assert result.confidence == pytest.approx(1.0)


@pytest.mark.parametrize("message", [
    "", "!", "?", "I'm worried about my booking", "so excited, can't wait!!",
    "ugh, the payment is not working and I'm stuck", "I feel bad, very disappointed 😢",
])
def test_confidence_in_unit_range(message):
    result = detect_emotion(message)
    assert 0.0 <= result.confidence <= 1.0


def test_detection_is_repeatable():
    message = "I'm worried about my booking, what if it fails?"
    assert detect_emotion(message) == detect_emotion(message)


def test_every_named_emotion_has_a_lexicon():
    assert set(LEXICONS) == set(Emotion) - {Emotion.NEUTRAL}


def test_badges_cover_all_emotions():
    assert set(EMOTION_EMOJI) == set(Emotion)
    assert set(EMOTION_COLOR) == set(Emotion)
    assert emotion_badge(Emotion.CONFUSED) == {"emoji": "🤔", "color": "text-purple-600"}


def test_shared_lexicon_entry_tie_goes_to_earlier_emotion():
    # "unsure" is listed for both confused and anxious.
    result = detect_emotion("unsure")
    assert result.emotion == Emotion.CONFUSED
    assert result.matched_keywords == ["unsure"]
    assert result.confidence == pytest.approx(0.2)
