from typing import Iterable, List, Optional

from models.project import Project

# Gallery filter buttons, in display order
FILTERS = ["All", "Java", "Python", "React"]
ALL = "All"

PROJECTS = [
    Project(
        title="Portfolio Website",
        description="A responsive portfolio website built with React and Tailwind CSS",
        tags=["React", "Tailwind CSS", "Framer Motion"],
        image="/portfolio.png",
        link="https://github.com/hemanthsrp/personal-portfolio",
    ),
    Project(
        title="Air Movies",
        description="A web application that allows users to search through airline movie entertainment catalogs",
        tags=["Python", "React", "Tailwind CSS", "MySQL"],
        image="/airmovies.png",
        link="https://github.com/hemanthsrp/airmovies",
    ),
    Project(
        title="InchWorm",
        description="A movement system developed by Team 14523 during 2022-2023 FTC POWERPLAY season",
        tags=["Java", "OpenCV"],
        image="/inchworm.png",
        link="https://github.com/hemanthsrp/InchWorm",
    ),
    Project(
        title="FTCScouter",
        description="A FTC Scouting application for tracking and analyzing competition data",
        tags=["Python"],
        image="/ftcscouter.png",
        link="https://github.com/hemanthsrp/FTC-Scouter",
    ),
    Project(
        title="Nutrition Tracker",
        description="An application for tracking and managing nutrition records and recipes, built in Java",
        tags=["Java"],
        image="/nutritiontracker.png",
    ),
]


def filter_projects(projects: Iterable[Project], tag: Optional[str] = None) -> List[Project]:
    """Return the projects carrying `tag`, or all of them for "All"."""
    if not tag or tag == ALL:
        return list(projects)
    return [project for project in projects if tag in project.tags]
