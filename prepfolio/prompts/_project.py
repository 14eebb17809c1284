"""Shared project-details block for prompts."""

from prepfolio.models.project import ProjectContext

NOT_PROVIDED = "Not provided"


def format_project_details(project: ProjectContext, include_solution: bool = False) -> str:
    """Render the project as a bulleted block."""
    tech_list = ", ".join(project.tech_stack) or "Not specified"
    lines = [
        f"- Name: {project.name or NOT_PROVIDED}",
        f"- Description: {project.description or NOT_PROVIDED}",
        f"- Tech Stack: {tech_list}",
        f"- Problem Solved: {project.problem or NOT_PROVIDED}",
    ]
    if include_solution:
        lines.append(f"- Solution: {project.solution or NOT_PROVIDED}")
    lines.extend([
        f"- Architecture: {project.architecture or NOT_PROVIDED}",
        f"- Challenges: {project.challenges or NOT_PROVIDED}",
    ])
    return "\n".join(lines)
