"""Exam catalog: exam types and the ordered subject list of each.

Subject order matters: the allocator rotates through subjects in this order.
"""

from planner.schemas import Subject

EXAM_TYPES = [
    Subject(key="jee_main", label="JEE Main"),
    Subject(key="jee_advanced", label="JEE Advanced"),
    Subject(key="neet", label="NEET"),
    Subject(key="upsc_cse", label="UPSC CSE"),
    Subject(key="cat", label="CAT"),
    Subject(key="gate_cse", label="GATE (CSE)"),
    Subject(key="sat", label="SAT"),
]

SUBJECTS_BY_EXAM: dict[str, list[Subject]] = {
    "jee_main": [
        Subject(key="physics", label="Physics"),
        Subject(key="chemistry", label="Chemistry"),
        Subject(key="mathematics", label="Mathematics"),
    ],
    "jee_advanced": [
        Subject(key="physics", label="Physics"),
        Subject(key="chemistry", label="Chemistry"),
        Subject(key="mathematics", label="Mathematics"),
    ],
    "neet": [
        Subject(key="physics", label="Physics"),
        Subject(key="chemistry", label="Chemistry"),
        Subject(key="biology", label="Biology"),
    ],
    "upsc_cse": [
        Subject(key="history", label="History"),
        Subject(key="geography", label="Geography"),
        Subject(key="polity", label="Indian Polity"),
        Subject(key="economy", label="Indian Economy"),
        Subject(key="environment", label="Environment & Ecology"),
        Subject(key="science_tech", label="Science & Technology"),
        Subject(key="current_affairs", label="Current Affairs"),
        Subject(key="csat", label="CSAT"),
    ],
    "cat": [
        Subject(key="varc", label="Verbal Ability & Reading Comprehension"),
        Subject(key="dilr", label="Data Interpretation & Logical Reasoning"),
        Subject(key="qa", label="Quantitative Ability"),
    ],
    "gate_cse": [
        Subject(key="engineering_math", label="Engineering Mathematics"),
        Subject(key="discrete_math", label="Discrete Mathematics"),
        Subject(key="digital_logic", label="Digital Logic"),
        Subject(key="coa", label="Computer Organization & Architecture"),
        Subject(key="programming_ds", label="Programming & Data Structures"),
        Subject(key="algorithms", label="Algorithms"),
        Subject(key="toc", label="Theory of Computation"),
        Subject(key="compiler_design", label="Compiler Design"),
        Subject(key="operating_systems", label="Operating Systems"),
        Subject(key="databases", label="Databases"),
        Subject(key="computer_networks", label="Computer Networks"),
        Subject(key="general_aptitude", label="General Aptitude"),
    ],
    "sat": [
        Subject(key="reading_writing", label="Reading & Writing"),
        Subject(key="math", label="Math"),
    ],
}


def get_exam_type(exam_type: str):
    """Return the exam type entry, or None if the key is unknown."""
    return next((e for e in EXAM_TYPES if e.key == exam_type), None)


def get_exam_subjects(exam_type: str) -> list[Subject]:
    """Ordered subject list for an exam type; empty for an unknown type."""
    return list(SUBJECTS_BY_EXAM.get(exam_type, []))
