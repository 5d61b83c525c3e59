from app.services.use_cases.analyze import AnalyzeSentenceUseCase
from app.services.use_cases.corpus import PersonalCorpusUseCase
from app.services.use_cases.quiz import QuizUseCase

__all__ = ["AnalyzeSentenceUseCase", "PersonalCorpusUseCase", "QuizUseCase"]
