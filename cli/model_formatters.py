# cli/model_formatters.py

# anything that renders domain objects or command results
from textwrap import dedent

import core.formatters as formatters
from core.grade_calculator import GradeStatistics
from models.student_record import GraduateRecord, StudentRecord

# === record formatters ===


def format_record_oneline(record: StudentRecord) -> str:
    honors = " [HONOR ROLL]" if record.is_honor_roll else ""
    line = f"{record.name:<20} | age {record.age:>3} | GPA {formatters.format_gpa(record.gpa)}{honors}"

    if isinstance(record, GraduateRecord):
        line += f" | {record.degree_type}, advisor: {record.advisor}"

    return line


def format_record_multiline(record: StudentRecord) -> str:
    text = dedent(
        f"""\
        ... Name: {record.name}
        ... Age: {record.age}
        ... GPA: {formatters.format_gpa(record.gpa)}"""
    )

    if isinstance(record, GraduateRecord):
        text += dedent(
            f"""
            ... Degree: {record.degree_type}
            ... Thesis: {record.thesis_title}
            ... Advisor: {record.advisor}"""
        )

    return text


# === grade detail formatters ===


def format_grade_detail(data: dict) -> str:
    record = data["record"]

    return dedent(
        f"""\
        Grade Information for {record.name}:
        ... GPA: {formatters.format_gpa(data["gpa"])}
        ... Letter Grade: {data["letter_grade"]}
        ... Passing: {formatters.format_yes_no(data["is_passing"])}
        ... Honor Roll: {formatters.format_yes_no(data["is_honor_roll"])}
        ... Academic Standing: {data["academic_standing"]}"""
    )


def format_statistics(stats: GradeStatistics) -> str:
    return dedent(
        f"""\
        GPA Statistics:
        ... Mean: {formatters.format_gpa(stats.mean)}
        ... Median: {formatters.format_gpa(stats.median)}
        ... Min: {formatters.format_gpa(stats.min)}
        ... Max: {formatters.format_gpa(stats.max)}"""
    )


# === calculator formatters ===


def format_required_gpa(data: dict) -> str:
    required = data["required_gpa"]
    text = (
        f"To reach {formatters.format_gpa(data['target_gpa'])} GPA, you need "
        f"{formatters.format_gpa(required)} GPA in remaining {data['remaining_credits']} credits"
    )

    if not data["is_reachable"]:
        text += "\nWARNING: This is impossible (requires GPA > 4.0)"
    elif required < 0.0:
        text += "\nGood news: You can achieve this even with 0.0 in remaining courses!"

    return text
