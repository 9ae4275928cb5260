from prompts import PROMPT_DELIMITER, build_slides_prompt


def test_text_is_inserted_verbatim():
    prompt = build_slides_prompt("Hello")

    assert "Hello" in prompt
    assert f"{PROMPT_DELIMITER}\n    Hello\n    {PROMPT_DELIMITER}" in prompt


def test_prompt_carries_all_six_rules():
    prompt = build_slides_prompt("Hello")

    # 1. clear title
    assert "título claro" in prompt
    # 2. short bullet list
    assert "lista de viñetas" in prompt
    assert "frases cortas" in prompt
    # 3. conversational speaker notes
    assert "notas del orador" in prompt
    assert "conversacionales" in prompt
    # 4. introduction, main points, conclusion
    assert "introducción" in prompt
    assert "conclusión" in prompt
    # 5. slide cap
    assert "10-12 diapositivas" in prompt
    # 6. same language as the input
    assert "mismo que el del texto proporcionado" in prompt


def test_prompt_is_deterministic():
    assert build_slides_prompt("Hola mundo") == build_slides_prompt("Hola mundo")


def test_braces_and_delimiters_in_text_are_not_altered():
    text = "uno {dos}\n---\ntres"

    prompt = build_slides_prompt(text)

    assert text in prompt
