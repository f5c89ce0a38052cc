"""Column layouts for each downloadable table."""
from .tabular_exporter import Column, ExportTable

# file name context per role, e.g. PrincipalLecturer_Reports_2024-05-01.csv
ROLE_CONTEXTS = {
    'Student': 'Student',
    'Lecturer': 'Lecturer',
    'Principal Lecturer': 'PrincipalLecturer',
    'Program Leader': 'ProgramLeader',
}


def context_for(user) -> str:
    return ROLE_CONTEXTS.get(getattr(user, 'role', None), 'Admin')


def _program(r):
    name, code = r.get('program_name'), r.get('program_code')
    if name and code:
        return f'{name} ({code})'
    return name or code


def _attendance(r):
    return f"{r.get('actual_students_present') or 0}/{r.get('total_registered_students') or 0}"


def review_reports_table(context: str) -> ExportTable:
    return ExportTable(
        context=context,
        entity='Reports',
        title='Lecture Reports Export',
        placeholder='N/A',
        columns=(
            Column('Module Name', 'module_name'),
            Column('Program', _program),
            Column('Lecturer', 'lecturer_name'),
            Column('Date', 'date_of_lecture'),
            Column('Week', 'week_of_reporting'),
            Column('Attendance', _attendance),
            Column('Venue', 'venue'),
            Column('Topic', 'topic_taught'),
            Column('Learning Outcomes', 'learning_outcomes'),
            Column('Recommendations', 'recommendations'),
            Column('Status', 'status'),
            Column('Principal Feedback', 'principal_feedback', placeholder='No feedback yet'),
        ),
    )


def student_reports_table(context: str = 'Student') -> ExportTable:
    return ExportTable(
        context=context,
        entity='Reports',
        title='Lecture Reports',
        columns=(
            Column('Module Name', 'module_name'),
            Column('Program Name', 'program_name'),
            Column('Program Code', 'program_code'),
            Column('Lecturer', 'lecturer_name'),
            Column('Date', 'date_of_lecture'),
            Column('Week', 'week_of_reporting'),
            Column('Attendance', _attendance),
            Column('Venue', 'venue'),
            Column('Topic', 'topic_taught'),
            Column('Learning Outcomes', 'learning_outcomes'),
            Column('Recommendations', 'recommendations'),
            Column('Status', 'status'),
            Column('Student Name', 'student_name', placeholder='Not signed'),
            Column('Student Number', 'student_number', placeholder='Not signed'),
        ),
    )


def challenges_table(context: str) -> ExportTable:
    return ExportTable(
        context=context,
        entity='Challenges',
        title='Challenges Export',
        columns=(
            Column('Title', lambda r: r.get('title') or r.get('challenge_type') or None),
            Column('Raised By', 'raised_by_name'),
            Column('Kind', 'kind'),
            Column('Module', 'module_name'),
            Column('Description', 'description'),
            Column('Priority', 'priority'),
            Column('Status', 'status'),
            Column('Submitted', 'submitted_date'),
            Column('Resolved', 'resolved_date', placeholder=''),
            Column('Feedback', 'feedback', placeholder='No feedback yet'),
        ),
    )


def rating_summary_table(context: str) -> ExportTable:
    return ExportTable(
        context=context,
        entity='Ratings',
        title='Module Ratings Summary',
        columns=(
            Column('Module', 'module_name'),
            Column('Program', _program),
            Column('Average Rating', 'average_rating'),
            Column('Stars', lambda r: r['stars']['text']),
            Column('Number of Ratings', 'rating_count'),
        ),
    )
