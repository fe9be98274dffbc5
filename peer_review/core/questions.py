from peer_review.schemas.review import Question, RatingScale

FIVE_POINT_SCALE = RatingScale(
    min=1,
    max=5,
    labels=["Poor", "Below Average", "Average", "Good", "Excellent"],
)

DEFAULT_PEER_REVIEW_QUESTIONS: tuple[Question, ...] = (
    Question(
        id="technical_competence",
        type="rating",
        category="technical",
        question="How would you rate this person's technical competence and expertise?",
        required=True,
        rating_scale=FIVE_POINT_SCALE,
    ),
    Question(
        id="communication_skills",
        type="rating",
        category="communication",
        question="How effectively does this person communicate with team members?",
        required=True,
        rating_scale=FIVE_POINT_SCALE,
    ),
    Question(
        id="collaboration",
        type="rating",
        category="collaboration",
        question="How well does this person collaborate and work with others?",
        required=True,
        rating_scale=FIVE_POINT_SCALE,
    ),
    Question(
        id="leadership_potential",
        type="rating",
        category="leadership",
        question="How would you rate this person's leadership skills and potential?",
        required=False,
        rating_scale=FIVE_POINT_SCALE,
    ),
    Question(
        id="strengths",
        type="text",
        category="general",
        question="What are this person's key strengths? Please provide specific examples.",
        required=True,
    ),
    Question(
        id="improvement_areas",
        type="text",
        category="general",
        question="What areas could this person improve? Please provide constructive feedback.",
        required=False,
    ),
    Question(
        id="work_relationship",
        type="multiple_choice",
        category="general",
        question="What best describes your working relationship with this person?",
        required=True,
        options=[
            "Direct report (they report to me)",
            "Peer/colleague (same level)",
            "Manager (I report to them)",
            "Cross-functional collaborator",
            "Occasional collaborator",
        ],
    ),
    Question(
        id="collaboration_frequency",
        type="multiple_choice",
        category="general",
        question="How frequently do you work with this person?",
        required=True,
        options=["Daily", "Weekly", "Monthly", "Rarely", "This is our first collaboration"],
    ),
    Question(
        id="overall_feedback",
        type="text",
        category="general",
        question="Any additional feedback or comments you'd like to share?",
        required=False,
    ),
)
