from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON speaks camelCase (personalInfo, startDate ...), Python uses snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _none_to_empty(value):
    return "" if value is None else value


def _none_to_list(value):
    return [] if value is None else value


class PhotoAdjustments(CamelModel):
    scale: float = 1
    translate_x: float = 0
    translate_y: float = 0
    rotation: float = 0


class PersonalInfo(CamelModel):
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    photo: str = ""  # data URI or URL
    photo_adjustments: PhotoAdjustments | None = None

    @field_validator(
        "name", "title", "email", "phone", "location",
        "website", "linkedin", "github", "photo",
        mode="before",
    )
    @classmethod
    def strings_not_null(cls, value):
        return _none_to_empty(value)


class Experience(CamelModel):
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""  # empty means current position
    description: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)

    @field_validator("company", "position", "start_date", "end_date", mode="before")
    @classmethod
    def strings_not_null(cls, value):
        return _none_to_empty(value)

    @field_validator("description", "achievements", mode="before")
    @classmethod
    def as_bullets(cls, value):
        # Older clients send one free-text block instead of bullets
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        return value


class Education(CamelModel):
    school: str = ""
    degree: str = ""
    field: str = ""
    graduation_year: str = ""
    gpa: str = ""

    @field_validator("school", "degree", "field", "graduation_year", "gpa", mode="before")
    @classmethod
    def strings_not_null(cls, value):
        return _none_to_empty(value)


class Project(CamelModel):
    name: str = ""
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    url: str = ""
    github: str = ""

    @field_validator("name", "description", "url", "github", mode="before")
    @classmethod
    def strings_not_null(cls, value):
        return _none_to_empty(value)

    @field_validator("technologies", mode="before")
    @classmethod
    def lists_not_null(cls, value):
        return _none_to_list(value)


class Certification(CamelModel):
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""

    @field_validator("name", "issuer", "date", "url", mode="before")
    @classmethod
    def strings_not_null(cls, value):
        return _none_to_empty(value)


class ResumeData(CamelModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)

    @field_validator("summary", mode="before")
    @classmethod
    def summary_not_null(cls, value):
        return _none_to_empty(value)

    @field_validator(
        "experience", "education", "skills", "languages",
        "projects", "certifications", "interests",
        mode="before",
    )
    @classmethod
    def lists_not_null(cls, value):
        return _none_to_list(value)

    @field_validator("personal_info", mode="before")
    @classmethod
    def default_personal_info(cls, value):
        return {} if value is None else value

    def has_content(self) -> bool:
        """True once the user has typed anything worth keeping."""
        info = self.personal_info
        return bool(
            info.name.strip()
            or info.title.strip()
            or info.email.strip()
            or self.summary.strip()
            or self.experience
            or self.education
            or self.skills
        )


class ValidationResult(CamelModel):
    is_valid: bool
    errors: list[str] = Field(default_factory=list)


def new_resume() -> ResumeData:
    # Blank document a builder session starts from
    return ResumeData()


def sample_resume() -> ResumeData:
    """Fixed sample document used by template previews."""
    return ResumeData(
        personal_info=PersonalInfo(
            name="John Doe",
            title="Software Engineer",
            email="john.doe@example.com",
            phone="+1 (555) 123-4567",
            location="San Francisco, CA",
            linkedin="linkedin.com/in/johndoe",
            github="github.com/johndoe",
        ),
        summary=(
            "Experienced software engineer with 5+ years of expertise in full-stack "
            "development, specializing in React, Node.js, and cloud technologies. "
            "Proven track record of delivering scalable solutions and leading "
            "development teams."
        ),
        experience=[
            Experience(
                company="Tech Corp",
                position="Senior Software Engineer",
                start_date="2022",
                end_date="",
                description=[
                    "Lead development of microservices architecture",
                    "Improved system performance by 40%",
                    "Mentored junior developers",
                ],
            ),
            Experience(
                company="Startup Inc",
                position="Full Stack Developer",
                start_date="2020",
                end_date="2022",
                description=[
                    "Built and maintained web applications using React, Node.js, and PostgreSQL",
                    "Collaborated with cross-functional teams to deliver features",
                ],
            ),
        ],
        education=[
            Education(
                school="University of Technology",
                degree="Bachelor of Science",
                field="Computer Science",
                graduation_year="2020",
                gpa="3.8",
            ),
        ],
        skills=["JavaScript", "React", "Node.js", "Python", "PostgreSQL", "AWS", "Docker", "Git"],
        languages=["English (Fluent)", "Spanish (Conversational)"],
    )
