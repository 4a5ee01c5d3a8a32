from postfeed.db import db
from postfeed.models.secret_question_model import SecretQuestion


def get_by_question(question: str):
    return SecretQuestion.query.filter(SecretQuestion.question == question).first()


def list_questions():
    rows = (
        db.session.query(SecretQuestion.question)
        .order_by(SecretQuestion.id.asc())
        .all()
    )
    return [row[0] for row in rows]


def seed_questions(questions) -> int:
    if SecretQuestion.query.count():
        return 0

    unique_questions = list(dict.fromkeys(questions))
    for question in unique_questions:
        db.session.add(SecretQuestion(question=question))
    db.session.commit()
    return len(unique_questions)
