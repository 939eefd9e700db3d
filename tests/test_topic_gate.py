from services.topic_gate import TopicGate


def test_admits_health_keywords_case_insensitively():
    gate = TopicGate()

    assert gate.admits("I have a HEADACHE and some Pain in my neck")
    assert gate.admits("Best diet for marathon training?")
    assert gate.admits("is my blood pressure too high")


def test_rejects_text_without_allowed_terms():
    gate = TopicGate()

    assert not gate.admits("what's the weather")
    assert not gate.admits("")
    assert not gate.admits(None)


def test_matches_substrings_without_stemming():
    gate = TopicGate()

    # "lab" and "cold" match inside unrelated words; the gate is a deterrent only.
    assert gate.admits("collaborate on a project")
    assert gate.admits("scolding the dog")


def test_custom_terms_replace_defaults():
    gate = TopicGate(["Yoga", ""])

    assert gate.terms == ("yoga",)
    assert gate.admits("morning yoga routine")
    assert not gate.admits("fever")
