"""
Template Question Generator for Prepfolio

Builds rehearsal questions from project metadata by filling
category templates. Works without any model or network access.
"""

import logging
import random

from prepfolio.models.project import ProjectContext
from prepfolio.models.question import GeneratedQuestion, QuestionCategory

logger = logging.getLogger(__name__)


QUESTION_TEMPLATES: dict[QuestionCategory, tuple[str, ...]] = {
    QuestionCategory.OVERVIEW: (
        "Walk me through {projectName} in about 2 minutes. What problem does it solve?",
        "Explain the core functionality of {projectName} as if I'm a non-technical PM.",
        "Give me the 30-second elevator pitch for {projectName}.",
    ),
    QuestionCategory.TECHNICAL: (
        "You used {tech} in this project. Why did you choose it over alternatives like {alternative}?",
        "How does the {tech} integration work in {projectName}? Walk me through the data flow.",
        "What was your approach to handling {concern} in this project?",
    ),
    QuestionCategory.ARCHITECTURE: (
        "Can you draw the architecture of {projectName}? Explain each component.",
        "How does data flow from the frontend to the database in your system?",
        "What design patterns did you use and why?",
    ),
    QuestionCategory.CHALLENGE: (
        "Tell me about the toughest bug you encountered. How did you debug it?",
        "What was the most technically challenging feature to implement?",
        "Describe a situation where your initial approach failed. What did you learn?",
    ),
    QuestionCategory.TRADEOFFS: (
        "What tradeoffs did you make when building {projectName}? Justify them.",
        "If you had to scale this to 100x users, what would break first?",
        "What technical debt did you knowingly take on and why?",
    ),
    QuestionCategory.IMPROVEMENTS: (
        "What would you do differently if you started {projectName} from scratch?",
        "What features would you add with another month of development time?",
        "How would you improve the performance/security/UX of {projectName}?",
    ),
}

ALTERNATIVES: dict[str, str] = {
    "React": "Vue or Angular",
    "Node.js": "Python/Django or Go",
    "PostgreSQL": "MongoDB or MySQL",
    "MongoDB": "PostgreSQL or DynamoDB",
    "Express": "Fastify or Koa",
    "Next.js": "Remix or plain React",
    "TypeScript": "JavaScript",
    "Redis": "Memcached or in-memory caching",
}
DEFAULT_ALTERNATIVE = "other options"
DEFAULT_TECH = "your chosen technology"

CONCERNS = (
    "authentication",
    "error handling",
    "state management",
    "data validation",
    "performance",
    "security",
)


class QuestionGenerator:
    """
    Generates rehearsal questions by template substitution.

    Categories are drawn at random, preferring ones not yet used in
    the current batch. Once every category has appeared, repeats are
    allowed.
    """

    def __init__(self, rng: random.Random | None = None):
        """
        Initialize question generator.

        Args:
            rng: Random source exposing ``choice``. Pass a seeded or
                scripted instance for reproducible batches.
        """
        self.rng = rng or random.Random()
        self.categories = list(QUESTION_TEMPLATES)

    def generate_questions(
        self,
        project: ProjectContext,
        count: int
    ) -> list[GeneratedQuestion]:
        """
        Generate ``count`` questions about a project.

        The caller is responsible for capping ``count``.

        Args:
            project: Project to ask about
            count: Number of questions to return

        Returns:
            Exactly ``max(count, 0)`` questions
        """
        questions: list[GeneratedQuestion] = []
        used: set[QuestionCategory] = set()

        for _ in range(max(count, 0)):
            category = self._pick_category(used)
            used.add(category)
            questions.append(self._build_question(project, category))

        logger.debug(
            f"Generated {len(questions)} template questions for '{project.name}' "
            f"across {len(used)} categories"
        )
        return questions

    def _pick_category(self, used: set[QuestionCategory]) -> QuestionCategory:
        category = self.rng.choice(self.categories)
        while category in used and len(used) < len(self.categories):
            category = self.rng.choice(self.categories)
        return category

    def _build_question(
        self,
        project: ProjectContext,
        category: QuestionCategory
    ) -> GeneratedQuestion:
        template = self.rng.choice(QUESTION_TEMPLATES[category])
        tech = self.rng.choice(project.tech_stack) if project.tech_stack else DEFAULT_TECH
        concern = self.rng.choice(CONCERNS)

        text = fill_template(
            template,
            projectName=project.name,
            tech=tech,
            alternative=ALTERNATIVES.get(tech, DEFAULT_ALTERNATIVE),
            concern=concern,
        )
        return GeneratedQuestion(question=text, category=category)


def fill_template(template: str, **values: str) -> str:
    """Replace every ``{key}`` occurrence. Unknown braces are left as-is."""
    for key, value in values.items():
        template = template.replace("{" + key + "}", value)
    return template
