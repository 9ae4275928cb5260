"""Prompt template sent to the model for every generation request."""

PROMPT_DELIMITER = "---"

SLIDES_PROMPT_TEMPLATE = """
    Eres un experto diseñador instruccional y creador de presentaciones. Tu tarea es convertir el siguiente texto extraído de un documento en una presentación de diapositivas clara, concisa y atractiva.

    Reglas:
    1.  Cada diapositiva debe tener un título claro y descriptivo.
    2.  El contenido de cada diapositiva debe ser una lista de viñetas (bullet points) que resuman los puntos clave. Usa frases cortas.
    3.  Crea "notas del orador" para cada diapositiva. Estas notas deben proporcionar un contexto más profundo, explicaciones o puntos de conversación para el presentador. Deben ser conversacionales.
    4.  Analiza el texto completo y estructura la presentación de manera lógica. Comienza con una introducción, desarrolla los puntos principales y termina con una conclusión o resumen.
    5.  No crees más de 10-12 diapositivas para mantener la presentación enfocada.
    6.  El idioma de la presentación debe ser el mismo que el del texto proporcionado.

    Aquí está el texto del documento:
    {delimiter}
    {text}
    {delimiter}
    """


def build_slides_prompt(text: str) -> str:
    # The text goes in as-is: a "---" line inside it is not escaped.
    return SLIDES_PROMPT_TEMPLATE.format(delimiter=PROMPT_DELIMITER, text=text)
