"""Lookup tables for column resolution and rating scales."""
from .models import trim

# Column-name prefixes used by sectioned exports, in lookup order
SECTION_PREFIXES = (
    "Summer Job Experience:",
    "Job Search Skills:",
    "Work Habits:",
    "Communication Skills:",
    "Relationships:",
    "Well-being:",
    "Demographics:",
)

# Question text -> column name for flat (snake_case) exports
QUESTION_TO_COLUMN_MAP = {
    # Summer Job Experience
    "Did you work at the same location/employer last summer?": "same_employer",
    "What category best describes what you did this summer?": "job_format",
    "On average, how many hours did you work each week this summer?": "hours_worked_per_week",
    "What type of daily work did you do this summer?": "daily_work_type",
    "Overall, how well did the job match with your skills and interests?": "job_match_interests",
    "How likely are you to consider a career in the type of work you did this summer?": "consider_career_likelihood",
    "If you had a job supervisor, how supportive were they overall?": "supervisor_support",
    "Did your supervisor - Properly train for your summer job?": "supervisor_properly_train",
    "Did your supervisor - Help you understand your role at your summer job?": "supervisor_understand_role",
    "Did your supervisor - Help you understand what was expected of you for your summer job?": "supervisor_understand_expectations",
    "Did your supervisor - Give you feedback on how you were doing at your summer job?": "supervisor_give_feedback",
    "Did your supervisor - Help you think about how to achieve your educational or career goals?": "supervisor_achieve_goals",
    "Did your supervisor - Make you feel comfortable talking about challenges outside of work?": "supervisor_comfortable",
    "Overall, how would you rate your job experience this summer?": "experience_rating",
    "Now that the summer is over - Do you have someone you can use as a job reference?": "job_reference_person",
    "Now that the summer is over - Do you have an adult you worked with that you consider a mentor?": "mentor_person",
    "Now that the summer is over - Would you recommend this job to a friend?": "recommend_job",
    "Now that the summer is over - Do you feel better prepared to enter a new job?": "new_job_prepared",
    "Which of the following industries are you most interested in pursuing as a career?": "interested_in_pursuing",
    "What do you plan to do after high school?": "post_high_school_plans",

    # Job Search Skills
    "Indicate whether you have completed any of the following - I have prepared, edited, and proofread my resume.": "prepared_resume",
    "Indicate whether you have completed any of the following - I have prepared, edited, and proofread my cover letter.": "prepared_cover_letter",
    "Indicate whether you have completed any of the following - I have asked an adult (e.g. family member, teacher, or neighbor) to serve as a reference for me when I apply for jobs.": "asked_adult_reference",
    "Indicate whether you have completed any of the following - I have searched for jobs online using a job board (e.g. Monster, Indeed, Career Builder, Snagajob, Zip Recruiter)": "searched_jobs_online",
    "Indicate whether you have completed any of the following  - I have talked with my family, neighbors, teachers, and friends, about the types of jobs I want -- and have asked for their help finding job opportunities.": "discussed_wanted_jobs",
    "Indicate whether you have completed any of the following  - I have developed some answer to the usual questions asked during an interview (e.g. what are your strength and weaknesses?)": "developed_interview_answers",
    "Indicate whether you have completed any of the following - I have practiced my interviewing skills with an adult (e.g. family member, teacher, or neighbor).": "practiced_interviewing",
    "What skills do you feel that you need to develop and improve to meet your future career goals?": "skills_to_improve",
    "Which of the following best describe how you typically manage your money?": "typically_manage_money",
    "Do you have any items that you regularly help pay for in your household?": "household_items_paid_for",

    # Work Habits
    "Indicate how much you agree with each of the following phrases - I am usually on time for school or work.": "usually_on_time_school_work",
    "Indicate how much you agree with each of the following phrases - I am rarely absent from school or call in sick.": "rarely_absent_school",
    "Indicate how much you agree with each of the following phrases - I usually meet my deadlines and hand in assignments on time.": "meet_deadlines",
    "Indicate how much you agree with each of the following phrases - I often keep track of my assignments and rarely forget to hand things in.": "keep_track_assignments",
    "Indicate how much you agree with each of the following phrases - I usually work independently without a lot of supervision.": "work_independently",
    "Indicate how much you agree with each of the following phrases - I often ask for help if directions are not clear.": "ask_for_help",
    "Indicate how much you agree with each of the following phrases - I often work in teams with other people.": "work_in_teams",

    # Communication Skills
    "Indicate how much you agree with each of the following phrases - I rarely get upset or lose my temper with other people.": "rarely_get_upset_or_lose_temper",
    "Indicate how much you agree with each of the following phrases - I rarely get upset when supervisors or teachers correct my mistakes.": "rarely_get_upset_when_corrected",
    "Indicate how much you agree with each of the following phrases - I rarely get into arguments with my friends.": "rarely_get_into_arguments_friends",
    "Indicate how much you agree with each of the following phrases - I rarely get into arguments with my parents or teachers.": "rarely_get_into_arguments_parents_teachers",
    "Indicate how much you agree with each of the following phrases - I rarely have difficulty resolving arguments with people.": "rarely_difficulty_resolving_arguments",
    "Indicate how much you agree with each of the following phrases - I often make eye contact when having a conversation.": "often_eye_contact_during_conversation",

    # Relationships
    "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Parent": "parent_role_model",
    "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Brother or sister": "sibling_role_model",
    "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Other family member (grandparent, aunt/uncle)": "family_role_model",
    "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Teacher": "teacher_role_model",
    "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Coach": "coach_role_model",
    "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Clergy (Minister/Priest, Imam, Rabbi)": "clergy_role_model",
    "Over the past 30 days, how often did you feel that EACH of the following was a positive role model for you?  - Job Supervisor": "supervisor_role_model",
    "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - Family": "contribute_family",
    "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups?  Friends": "contribute_friends",
    "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - Co-workers": "contribute_coworkers",
    "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - People in your neighborhood": "contribute_neighborhood",
    "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - People in your school": "contribute_school",
    "Over the past 30 days, how often did you feel that you had a lot to contribute to EACH of the following groups? - People in your place of worship": "contribute_worship",

    # Well-being
    "Over the last two weeks, how often have you been bothered by the following problems? - Feeling nervous, anxious, or on edge": "feeling_nervous",
    "Over the last two weeks, how often have you been bothered by the following problems? - Not being able to stop or control worrying": "cannot_stop_worrying",
    "Over the last two weeks, how often have you been bothered by the following problems? - Feeling down, depressed or hopeless": "feeling_down",
    "Over the last two weeks, how often have you been bothered by the following problems? - Little interest or pleasure in doing things": "little_interest_in_things",

    # Demographics
    "Gender": "gender",
    "Race": "race",
    "Is there another language other than English that is regularly spoken in your home?": "second_language_spoken_at_home",
    "What best describes the adult guardian that you primarily live with?": "adult_live_with",
}

# Rating label (lowercased) -> ordinal, 5 is the most positive end of the scale
RATING_SCALE = {
    # Supportiveness
    "very supportive": 5,
    "mostly supportive": 4,
    "somewhat supportive": 3,
    "not very supportive": 2,
    "not at all supportive": 1,
    # Match
    "very well": 5,
    "somewhat well": 3,
    "not very well": 2,
    "not at all well": 1,
    # Likelihood
    "very likely": 5,
    "likely": 4,
    "not sure / maybe": 3,
    "unlikely": 2,
    "very unlikely": 1,
    # Overall experience
    "very good": 5,
    "somewhat good": 4,
    "not very good": 2,
    "not at all good": 1,
    # Agreement
    "strongly agree": 5,
    "agree": 4,
    "neutral": 3,
    "disagree": 2,
    "strongly disagree": 1,
}


def rating_ordinal(label: str) -> int:
    """Ordinal for a rating label, 0 when the label is not on a known scale."""
    return RATING_SCALE.get(trim(label).lower(), 0)
