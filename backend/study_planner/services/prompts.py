"""
Study plan prompt templates.

The prompt defines the outline convention the PDF layout depends on:
- Everything inside ONE fenced code block (we extract only that block)
- Top-level sections "1. Fundamentos" ... "4. Expert" (single digit)
- Sub-numbering 1.1, 1.1.1 for topics
- A "Tempo Estimado: ..." line per top-level section
- "1.1.1. Nome: descrição" for the deepest topics

If you change the format here, check outline_parser.py too.
"""


SYSTEM_PROMPT = """Você é um especialista em criar os melhores planos de \
estudo do mundo. Você organiza o aprendizado de forma progressiva, do básico \
ao extremamente avançado, e escreve sempre em português, em texto plano."""


def build_study_plan_prompt(subject: str) -> str:
    """Build the user prompt asking for a full study plan on `subject`."""
    return f"""O usuário quer estudar sobre "{subject}".

Crie um plano de estudo extremamente detalhado com tudo que ele deve estudar \
para se tornar um expert no assunto, do básico ao extremamente avançado.

Siga ESTRITAMENTE as seguintes instruções:
1. Crie o plano de estudo completo em formato de outline dentro de uma ÚNICA \
code box (começando com ``` e terminando com ```).
2. Organize o conteúdo de forma progressiva: 1. Fundamentos -> 2. Intermediário \
-> 3. Avançado -> 4. Expert. Use sub-numeração para tópicos e subtópicos \
(e.g., 1.1, 1.1.1, 2.1, 2.1.1).
3. Para CADA GRANDE SEÇÃO (Fundamentos, Intermediário, etc.), inclua uma \
estimativa de tempo total de estudo (e.g., "Tempo Estimado: 40-60 horas").
4. Para cada subtópico final (o nível mais profundo da numeração), forneça \
uma breve descrição de uma linha sobre o que será estudado.
5. O formato deve ser limpo, claro e fácil de seguir, usando apenas texto \
plano e indentação dentro da code box.
6. O plano deve estar em português.

Exemplo de formato para um subtópico:
1.1.1. Nome do Subtópico: Breve descrição do que será estudado.
"""
