from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

COMMON_JOB_KEYWORDS: tuple[str, ...] = (
    # Programming languages
    "JavaScript", "Python", "Java", "C++", "C#", "Ruby", "PHP", "Swift", "Kotlin",
    "Go", "Rust", "TypeScript", "Scala", "R", "MATLAB", "Perl", "Shell", "Bash",
    "HTML", "CSS", "SQL", "NoSQL",
    # Frameworks and libraries
    "React", "Angular", "Vue.js", "Next.js", "Svelte", "Express", "Django", "Flask",
    "Spring", "Laravel", "Ruby on Rails", "ASP.NET", ".NET Core", "Bootstrap",
    "jQuery", "TensorFlow", "PyTorch", "Keras", "Pandas", "NumPy", "Node.js",
    # Databases
    "MySQL", "PostgreSQL", "MongoDB", "Redis", "Cassandra", "Oracle", "SQL Server",
    "DynamoDB", "Firebase", "Elasticsearch", "Neo4j", "MariaDB",
    # Cloud and DevOps
    "AWS", "Azure", "Google Cloud", "Docker", "Kubernetes", "Jenkins", "GitLab CI",
    "GitHub Actions", "Terraform", "Ansible", "Puppet", "Chef", "Prometheus",
    "Grafana", "ELK Stack", "CI/CD", "DevOps", "SRE", "Microservicios",
    # Version control
    "Git", "GitHub", "GitLab", "Bitbucket", "SVN",
    # Methodologies
    "Agile", "Scrum", "Kanban", "Lean", "XP", "Waterfall", "TDD", "BDD",
    # Roles
    "Desarrollador", "Developer", "Ingeniero", "Engineer", "Arquitecto", "Architect",
    "Full Stack", "Frontend", "Backend", "Mobile", "iOS", "Android",
    "QA", "Tester", "Project Manager", "Product Owner", "Scrum Master",
    "UX Designer", "UI Designer", "Data Scientist", "Data Engineer", "Data Analyst",
    "Machine Learning", "IA", "Artificial Intelligence",
    # Soft skills
    "Trabajo en equipo", "Teamwork", "Comunicación", "Communication",
    "Liderazgo", "Leadership", "Resolución de problemas", "Problem solving",
    "Pensamiento crítico", "Critical thinking", "Adaptabilidad", "Adaptability",
    "Creatividad", "Creativity", "Gestión del tiempo", "Time management",
    # Action verbs
    "Desarrollé", "Implemented", "Lideré", "Led", "Diseñé", "Designed",
    "Optimicé", "Optimized", "Aumenté", "Increased", "Reduje", "Reduced",
    "Mejoré", "Improved", "Automaticé", "Automated", "Gestioné", "Managed",
    "Coordiné", "Coordinated", "Colaboré", "Collaborated", "Creé", "Created",
)

KEYWORDS_BY_INDUSTRY: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "webDevelopment": (
            "JavaScript", "HTML", "CSS", "React", "Angular", "Vue.js", "Node.js",
            "Responsive Design", "Web Components", "PWA", "SPA", "SSR", "JAMstack",
        ),
        "dataScienceAI": (
            "Python", "R", "Machine Learning", "Deep Learning", "Neural Networks",
            "TensorFlow", "PyTorch", "Keras", "Scikit-learn", "NLP", "Computer Vision",
            "Big Data", "Hadoop", "Spark", "Data Mining", "Estadística",
        ),
        "devOps": (
            "Docker", "Kubernetes", "CI/CD", "Jenkins", "Ansible", "Terraform",
            "Cloud", "AWS", "Azure", "GCP", "Monitorización", "Logging", "SRE",
            "Infraestructura como código", "Automatización",
        ),
        "mobileDevelopment": (
            "iOS", "Android", "Swift", "Kotlin", "React Native", "Flutter",
            "Xamarin", "Mobile UI", "App Store", "Google Play", "Notifications",
            "Mobile Testing", "Responsive Design",
        ),
        "cybersecurity": (
            "Seguridad", "Ethical Hacking", "Pentesting", "Vulnerabilidades",
            "Firewall", "Encryption", "Cryptography", "Identity Management",
            "OWASP", "Security Audit", "Compliance", "Risk Assessment",
        ),
    }
)

NEGATIVE_KEYWORDS: tuple[str, ...] = (
    "Inexperiencia", "Inexperienced", "Limitado", "Limited", "Principiante", "Beginner",
    "Falta de", "Lack of", "Poca experiencia", "Little experience", "Estudiante", "Student",
)

STRENGTH_INDICATORS: tuple[str, ...] = (
    "experiencia probada", "proven experience",
    "experto en", "expert in",
    "especialista en", "specialist in",
    "amplia experiencia", "extensive experience",
    "profundo conocimiento", "deep knowledge",
    "certificado en", "certified in",
)


def find_phrases(text: str, phrases: tuple[str, ...]) -> list[str]:
    lowered = text.lower()
    return [phrase for phrase in phrases if phrase.lower() in lowered]
