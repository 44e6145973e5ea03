"""
Unit tests for the outline line classifier.
"""

import pytest

from study_planner.models import LineRole
from study_planner.services.outline_parser import (
    CLASSIFICATION_RULES,
    classify_line,
    classify_outline,
    classify_role,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1. Fundamentos", LineRole.SECTION_HEADER),
        ("4. Expert", LineRole.SECTION_HEADER),
        ("1.1 Subtópico", LineRole.PLAIN_TEXT),
        ("1.1 Subtópico: com descrição", LineRole.TOPIC_WITH_DESCRIPTION),
        ("Tempo Estimado: 40-60 horas", LineRole.TIME_ESTIMATE),
        ("TEMPO ESTIMADO: 5 horas", LineRole.TIME_ESTIMATE),
        ("1.1.1. Variáveis: Estudo de tipos primitivos", LineRole.TOPIC_WITH_DESCRIPTION),
        ("", LineRole.BLANK),
        ("   \t ", LineRole.BLANK),
        ("Texto livre sem dois-pontos", LineRole.PLAIN_TEXT),
        ("10. Dois dígitos", LineRole.PLAIN_TEXT),
    ],
)
def test_classification_table(line, expected):
    assert classify_line(line).role == expected


def test_section_header_with_colon_stays_header():
    """Header precedence beats the colon rule."""
    assert classify_role("2. Intermediário: conceitos") == LineRole.SECTION_HEADER


def test_topic_title_and_description_split():
    line = classify_line("1.1.1. Variáveis: Estudo de tipos primitivos")
    assert line.topic_title == "1.1.1. Variáveis:"
    assert line.topic_description == "Estudo de tipos primitivos"


def test_topic_description_keeps_later_colons():
    line = classify_line("1.2.1. Horários: das 08:00 às 10:00 ")
    assert line.topic_title == "1.2.1. Horários:"
    assert line.topic_description == "das 08:00 às 10:00"


def test_topic_with_empty_description():
    line = classify_line("1.3. Revisão:   ")
    assert line.role == LineRole.TOPIC_WITH_DESCRIPTION
    assert line.topic_title == "1.3. Revisão:"
    assert line.topic_description == ""


def test_raw_indent_counts_leading_whitespace():
    line = classify_line("    1.1.1. Intro: texto")
    assert line.raw_indent == 4
    assert line.trimmed == "1.1.1. Intro: texto"


def test_non_topic_lines_have_no_topic_parts():
    line = classify_line("1. Fundamentos")
    assert line.topic_title == ""
    assert line.topic_description == ""


def test_rules_are_ordered_and_end_with_catch_all():
    roles = [role for _, role in CLASSIFICATION_RULES]
    assert roles == [
        LineRole.BLANK,
        LineRole.SECTION_HEADER,
        LineRole.TIME_ESTIMATE,
        LineRole.TOPIC_WITH_DESCRIPTION,
        LineRole.PLAIN_TEXT,
    ]
    catch_all, _ = CLASSIFICATION_RULES[-1]
    assert catch_all("anything at all")


def test_classify_outline_keeps_every_line(sample_outline):
    lines = classify_outline(sample_outline)

    assert [line.index for line in lines] == [0, 1, 2, 3, 4]
    assert [line.role for line in lines] == [
        LineRole.SECTION_HEADER,
        LineRole.TIME_ESTIMATE,
        LineRole.TOPIC_WITH_DESCRIPTION,
        LineRole.BLANK,
        LineRole.SECTION_HEADER,
    ]


def test_classify_empty_outline_is_one_blank_line():
    lines = classify_outline("")
    assert len(lines) == 1
    assert lines[0].role == LineRole.BLANK


def test_windows_line_endings_are_trimmed():
    lines = classify_outline("1. Fundamentos\r\nTexto\r\n")
    assert lines[0].role == LineRole.SECTION_HEADER
    assert lines[0].trimmed == "1. Fundamentos"
    assert lines[1].role == LineRole.PLAIN_TEXT
