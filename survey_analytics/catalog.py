"""Survey question catalog, grouped by section as the instrument presents it."""
from typing import Dict, List, Optional

from .models import Question, trim
from .stages.resolve import normalize_text

# section -> (id, question text, question type)
SURVEY_SECTIONS = {
    "Summer Job Experience": [
        (1, "Did you work at the same location/employer last summer?", "yes-no"),
        (2, "What category best describes what you did this summer?", "multiple-choice"),
        (3, "On average, how many hours did you work each week this summer?", "multiple-choice"),
        (4, "What type of daily work did you do this summer?", "multiple-choice"),
        (5, "Overall, how well did the job match with your skills and interests?", "rating"),
        (6, "How likely are you to consider a career in the type of work you did this summer?", "rating"),
        (7, "If you had a job supervisor, how supportive were they overall?", "rating"),
        (8, "Did your supervisor - Properly train for your summer job?", "yes-no"),
        (9, "Did your supervisor - Help you understand your role at your summer job?", "yes-no"),
        (10, "Did your supervisor - Help you understand what was expected of you for your summer job?", "yes-no"),
        (11, "Did your supervisor - Give you feedback on how you were doing at your summer job?", "yes-no"),
        (12, "Did your supervisor - Help you think about how to achieve your educational or career goals?", "yes-no"),
        (13, "Did your supervisor - Make you feel comfortable talking about challenges outside of work?", "yes-no"),
        (14, "Overall, how would you rate your job experience this summer?", "rating"),
        (15, "Now that the summer is over - Do you have someone you can use as a job reference?", "yes-no"),
        (16, "Now that the summer is over - Do you have an adult you worked with that you consider a mentor?", "yes-no"),
        (17, "Now that the summer is over - Would you recommend this job to a friend?", "yes-no"),
        (18, "Now that the summer is over - Do you feel better prepared to enter a new job?", "yes-no"),
        (19, "Which of the following industries are you most interested in pursuing as a career?", "multiple-choice"),
        (20, "What do you plan to do after high school?", "multiple-choice"),
    ],
    "Job Search Skills": [
        (21, "Indicate whether you have completed any of the following - I have prepared, edited, and proofread my resume.", "yes-no"),
        (22, "Indicate whether you have completed any of the following - I have prepared, edited, and proofread my cover letter.", "yes-no"),
        (23, "Indicate whether you have completed any of the following - I have asked an adult (e.g. family member, teacher, or neighbor) to serve as a reference for me when I apply for jobs.", "yes-no"),
        (24, "Indicate whether you have completed any of the following - I have searched for jobs online using a job board (e.g. Monster, Indeed, Career Builder, Snagajob, Zip Recruiter)", "yes-no"),
        (25, "Indicate whether you have completed any of the following  - I have talked with my family, neighbors, teachers, and friends, about the types of jobs I want -- and have asked for their help finding job opportunities.", "yes-no"),
        (26, "Indicate whether you have completed any of the following  - I have developed some answer to the usual questions asked during an interview (e.g. what are your strength and weaknesses?)", "yes-no"),
        (27, "Indicate whether you have completed any of the following - I have practiced my interviewing skills with an adult (e.g. family member, teacher, or neighbor).", "yes-no"),
        (28, "What skills do you feel that you need to develop and improve to meet your future career goals?", "text"),
        (29, "Which of the following best describe how you typically manage your money?", "multiple-choice"),
        (30, "Do you have any items that you regularly help pay for in your household?", "yes-no"),
    ],
    "Work Habits": [
        (31, "Indicate how much you agree with each of the following phrases - I am usually on time for school or work.", "rating"),
        (32, "Indicate how much you agree with each of the following phrases - I am rarely absent from school or call in sick.", "rating"),
        (33, "Indicate how much you agree with each of the following phrases - I usually meet my deadlines and hand in assignments on time.", "rating"),
        (34, "Indicate how much you agree with each of the following phrases - I often keep track of my assignments and rarely forget to hand things in.", "rating"),
        (35, "Indicate how much you agree with each of the following phrases - I usually work independently without a lot of supervision.", "rating"),
        (36, "Indicate how much you agree with each of the following phrases - I often ask for help if directions are not clear.", "rating"),
        (37, "Indicate how much you agree with each of the following phrases - I often work in teams with other people.", "rating"),
    ],
    "Communication Skills": [
        (38, "Indicate how much you agree with each of the following phrases - I rarely get upset or lose my temper with other people.", "rating"),
        (39, "Indicate how much you agree with each of the following phrases - I rarely get upset when supervisors or teachers correct my mistakes.", "rating"),
        (40, "Indicate how much you agree with each of the following phrases - I rarely get into arguments with my friends.", "rating"),
        (41, "Indicate how much you agree with each of the following phrases - I rarely get into arguments with my parents or teachers.", "rating"),
        (42, "Indicate how much you agree with each of the following phrases - I rarely have difficulty resolving arguments with people.", "rating"),
        (43, "Indicate how much you agree with each of the following phrases - I often make eye contact when having a conversation.", "rating"),
    ],
    "Relationships": [
        (44, "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Parent", "rating"),
        (45, "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Brother or sister", "rating"),
        (46, "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Other family member (grandparent, aunt/uncle)", "rating"),
        (47, "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Teacher", "rating"),
        (48, "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Coach", "rating"),
        (49, "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Clergy (Minister/Priest, Imam, Rabbi)", "rating"),
        (50, "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Job Supervisor", "rating"),
        (51, "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - Family", "rating"),
        (52, "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups?  Friends", "rating"),
        (53, "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - Co-workers", "rating"),
        (54, "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - People in your neighborhood", "rating"),
        (55, "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - People in your school", "rating"),
        (56, "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - People in your place of worship", "rating"),
    ],
    "Well-being": [
        (57, "Over the last two weeks, how often have you been bothered by the following problems? - Feeling nervous, anxious, or on edge", "rating"),
        (58, "Over the last two weeks, how often have you been bothered by the following problems? - Not being able to stop or control worrying", "rating"),
        (59, "Over the last two weeks, how often have you been bothered by the following problems? - Feeling down, depressed or hopeless", "rating"),
        (60, "Over the last two weeks, how often have you been bothered by the following problems? - Little interest or pleasure in doing things", "rating"),
    ],
    "Demographics": [
        (61, "Gender", "multiple-choice"),
        (62, "Race", "multiple-choice"),
        (63, "Is there another language other than English that is regularly spoken in your home?", "yes-no"),
        (64, "What best describes the adult guardian that you primarily live with?", "multiple-choice"),
    ],
}

_QUESTIONS: List[Question] = [
    Question(id=qid, text=text, type=qtype)
    for entries in SURVEY_SECTIONS.values()
    for qid, text, qtype in entries
]
_BY_ID: Dict[int, Question] = {q.id: q for q in _QUESTIONS}


def get_sections() -> List[str]:
    return list(SURVEY_SECTIONS.keys())


def get_questions(section: Optional[str] = None) -> List[Question]:
    """All catalog questions, or those of one section."""
    if section is None:
        return list(_QUESTIONS)
    return [Question(id=qid, text=text, type=qtype) for qid, text, qtype in SURVEY_SECTIONS.get(section, [])]


def get_question(question_id: int) -> Optional[Question]:
    return _BY_ID.get(question_id)


def find_question(text: str) -> Optional[Question]:
    """Catalog question whose text equals the given text after whitespace/case normalization."""
    target = normalize_text(trim(text))
    for question in _QUESTIONS:
        if normalize_text(question.text) == target:
            return question
    return None
