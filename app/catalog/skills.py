from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict

PROGRAMMING = "Lenguajes de Programación"
FRAMEWORKS = "Frameworks y Bibliotecas"
DATABASES = "Bases de Datos"
CLOUD_DEVOPS = "Cloud y DevOps"
SOFT_SKILLS = "Habilidades Blandas"
METHODOLOGIES = "Metodologías"
OTHER = "Otras"

# Buckets used when grouping detected skills, in display order.
SKILL_CATEGORIES: tuple[str, ...] = (
    PROGRAMMING,
    FRAMEWORKS,
    DATABASES,
    CLOUD_DEVOPS,
    SOFT_SKILLS,
    METHODOLOGIES,
    OTHER,
)

# Vocabulary searched by the skill analyzer, lower-case.
COMMON_SKILLS: tuple[str, ...] = (
    "javascript", "python", "java", "react", "node", "express", "sql", "nosql",
    "mongodb", "aws", "azure", "docker", "kubernetes", "git", "agile", "scrum",
    "comunicación", "liderazgo", "gestión de proyectos", "resolución de problemas",
    "html", "css", "typescript", "php", "c#", ".net", "angular", "vue", "spring",
    "django", "flask", "laravel", "ruby", "go", "rust", "scala", "swift",
    "microservicios", "devops", "ci/cd", "jenkins", "github actions",
)

_SKILL_CATEGORY: Mapping[str, str] = MappingProxyType(
    {
        "javascript": PROGRAMMING,
        "python": PROGRAMMING,
        "java": PROGRAMMING,
        "typescript": PROGRAMMING,
        "php": PROGRAMMING,
        "c#": PROGRAMMING,
        "ruby": PROGRAMMING,
        "go": PROGRAMMING,
        "rust": PROGRAMMING,
        "scala": PROGRAMMING,
        "swift": PROGRAMMING,
        "html": PROGRAMMING,
        "css": PROGRAMMING,
        "react": FRAMEWORKS,
        "angular": FRAMEWORKS,
        "vue": FRAMEWORKS,
        "node": FRAMEWORKS,
        "express": FRAMEWORKS,
        "spring": FRAMEWORKS,
        "django": FRAMEWORKS,
        "flask": FRAMEWORKS,
        "laravel": FRAMEWORKS,
        ".net": FRAMEWORKS,
        "sql": DATABASES,
        "nosql": DATABASES,
        "mongodb": DATABASES,
        "mysql": DATABASES,
        "postgresql": DATABASES,
        "oracle": DATABASES,
        "redis": DATABASES,
        "aws": CLOUD_DEVOPS,
        "azure": CLOUD_DEVOPS,
        "gcp": CLOUD_DEVOPS,
        "docker": CLOUD_DEVOPS,
        "kubernetes": CLOUD_DEVOPS,
        "devops": CLOUD_DEVOPS,
        "ci/cd": CLOUD_DEVOPS,
        "jenkins": CLOUD_DEVOPS,
        "github actions": CLOUD_DEVOPS,
        "git": CLOUD_DEVOPS,
        "microservicios": CLOUD_DEVOPS,
        "comunicación": SOFT_SKILLS,
        "liderazgo": SOFT_SKILLS,
        "gestión de proyectos": SOFT_SKILLS,
        "resolución de problemas": SOFT_SKILLS,
        "trabajo en equipo": SOFT_SKILLS,
        "agile": METHODOLOGIES,
        "scrum": METHODOLOGIES,
    }
)


class SkillDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    aliases: tuple[str, ...]


def _skill(name: str, category: str, *aliases: str) -> SkillDefinition:
    return SkillDefinition(name=name, category=category, aliases=aliases)


TECHNICAL_SKILLS: tuple[SkillDefinition, ...] = (
    _skill("JavaScript", PROGRAMMING, "js", "javascript", "ecmascript", "es6"),
    _skill("Python", PROGRAMMING, "python", "py", "python3"),
    _skill("Java", PROGRAMMING, "java", "jdk", "j2ee"),
    _skill("TypeScript", PROGRAMMING, "typescript", "ts"),
    _skill("C#", PROGRAMMING, "c#", "csharp", ".net"),
    _skill("PHP", PROGRAMMING, "php"),
    _skill("Ruby", PROGRAMMING, "ruby", "rb"),
    _skill("Go", PROGRAMMING, "go", "golang"),
    _skill("Rust", PROGRAMMING, "rust", "rustlang"),
    _skill("Swift", PROGRAMMING, "swift"),
    _skill("Kotlin", PROGRAMMING, "kotlin"),
    _skill("C++", PROGRAMMING, "c++", "cpp"),
    _skill("HTML", PROGRAMMING, "html", "html5"),
    _skill("CSS", PROGRAMMING, "css", "css3", "scss", "sass", "less"),
    _skill("SQL", PROGRAMMING, "sql", "t-sql", "pl/sql"),
    _skill("React", FRAMEWORKS, "react", "reactjs", "react.js"),
    _skill("Angular", FRAMEWORKS, "angular", "angularjs", "angular2+"),
    _skill("Vue.js", FRAMEWORKS, "vue", "vuejs", "vue.js"),
    _skill("Node.js", FRAMEWORKS, "node", "nodejs", "node.js"),
    _skill("Express", FRAMEWORKS, "express", "expressjs"),
    _skill("Django", FRAMEWORKS, "django"),
    _skill("Flask", FRAMEWORKS, "flask"),
    _skill("Spring", FRAMEWORKS, "spring", "spring boot", "spring mvc"),
    _skill("Laravel", FRAMEWORKS, "laravel"),
    _skill(".NET Core", FRAMEWORKS, ".net core", "dotnet", "asp.net"),
    _skill("MongoDB", DATABASES, "mongodb", "mongo"),
    _skill("MySQL", DATABASES, "mysql"),
    _skill("PostgreSQL", DATABASES, "postgresql", "postgres"),
    _skill("Oracle", DATABASES, "oracle", "oracle db"),
    _skill("Microsoft SQL Server", DATABASES, "sql server", "mssql"),
    _skill("Redis", DATABASES, "redis"),
    _skill("Elasticsearch", DATABASES, "elasticsearch", "elastic", "elk"),
    _skill("AWS", CLOUD_DEVOPS, "aws", "amazon web services"),
    _skill("Azure", CLOUD_DEVOPS, "azure", "microsoft azure"),
    _skill("Google Cloud", CLOUD_DEVOPS, "gcp", "google cloud"),
    _skill("Docker", CLOUD_DEVOPS, "docker", "contenedores"),
    _skill("Kubernetes", CLOUD_DEVOPS, "kubernetes", "k8s"),
    _skill("CI/CD", CLOUD_DEVOPS, "ci/cd", "integración continua", "despliegue continuo"),
    _skill("Jenkins", CLOUD_DEVOPS, "jenkins"),
    _skill("Git", CLOUD_DEVOPS, "git", "github", "gitlab", "control de versiones"),
    _skill("Terraform", CLOUD_DEVOPS, "terraform", "iac"),
    _skill("Ansible", CLOUD_DEVOPS, "ansible"),
    _skill("Microservicios", CLOUD_DEVOPS, "microservicios", "microservices"),
)

SOFT_SKILL_DEFINITIONS: tuple[SkillDefinition, ...] = (
    _skill("Comunicación", SOFT_SKILLS, "comunicación", "communication"),
    _skill("Trabajo en Equipo", SOFT_SKILLS, "trabajo en equipo", "teamwork"),
    _skill("Liderazgo", SOFT_SKILLS, "liderazgo", "leadership", "líder", "dirigir"),
    _skill("Gestión de Proyectos", SOFT_SKILLS, "gestión de proyectos", "project management"),
    _skill("Resolución de Problemas", SOFT_SKILLS, "resolución de problemas", "problem solving"),
    _skill("Pensamiento Crítico", SOFT_SKILLS, "pensamiento crítico", "critical thinking"),
    _skill("Adaptabilidad", SOFT_SKILLS, "adaptabilidad", "adaptable", "flexibility"),
    _skill("Creatividad", SOFT_SKILLS, "creatividad", "creativo", "creativity"),
    _skill("Gestión del Tiempo", SOFT_SKILLS, "gestión del tiempo", "time management"),
)

ALL_SKILLS: tuple[SkillDefinition, ...] = TECHNICAL_SKILLS + SOFT_SKILL_DEFINITIONS


def find_skill_definition(raw: str) -> SkillDefinition | None:
    """Resolve a skill name or alias to its catalog entry."""
    needle = raw.strip().lower()
    for definition in ALL_SKILLS:
        if needle == definition.name.lower() or needle in definition.aliases:
            return definition
    return None


def get_skill_category(skill: str) -> str:
    normalized = skill.strip().lower()
    category = _SKILL_CATEGORY.get(normalized)
    if category is not None:
        return category
    definition = find_skill_definition(normalized)
    if definition is not None and definition.category in SKILL_CATEGORIES:
        return definition.category
    return OTHER
