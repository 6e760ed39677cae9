"""Static collections served when Notion cannot be reached.

Every table is already in the public (camelCase) response shape so it can be
returned as-is by the content service.
"""

from __future__ import annotations

from typing import Any

from codejedi_portfolio.models import ContactChannel

DEFAULT_EMOJI = "\U0001f48e"
PLACEHOLDER_IMAGE = "/placeholder.svg"

FALLBACK_WORK_EXPERIENCE: list[dict[str, Any]] = [
    {
        "id": "opentext-2024",
        "title": "Software Developer Intern - DevOps (Hybrid)",
        "company": "Open Text Corporation",
        "location": "Ottawa, ON, Canada",
        "startDate": "2024-09-03",
        "endDate": "2024-12-20",
        "tenureDays": 108,
        "link": "https://www.opentext.com/",
        "year": "2024",
        "dateRange": "Sep ~ Dec, 2024",
        "emoji": DEFAULT_EMOJI,
        "icon": None,
        "iconType": None,
    },
    {
        "id": "sunlife-2024",
        "title": "Cloud Engineer Intern (Remote)",
        "company": "Sun Life Financial",
        "location": "Toronto, ON, Canada",
        "startDate": "2024-05-06",
        "endDate": "2024-08-30",
        "tenureDays": 116,
        "link": "https://www.sunlife.ca",
        "year": "2024",
        "dateRange": "May ~ Aug, 2024",
        "emoji": DEFAULT_EMOJI,
        "icon": None,
        "iconType": None,
    },
    {
        "id": "oanda-2023",
        "title": "Site Reliability Engineer Intern (Remote)",
        "company": "OANDA (Canada) Corporation.",
        "location": "Toronto, ON, Canada",
        "startDate": "2023-01-09",
        "endDate": "2023-04-21",
        "tenureDays": 102,
        "link": "https://oanda.com",
        "year": "2023",
        "dateRange": "Jan ~ Apr, 2023",
        "emoji": DEFAULT_EMOJI,
        "icon": None,
        "iconType": None,
    },
    {
        "id": "carta-2022",
        "title": "Site Reliability Engineer Intern (Hybrid)",
        "company": "Carta Maple Technologies Inc.",
        "location": "Waterloo, ON, Canada",
        "startDate": "2022-05-02",
        "endDate": "2022-08-26",
        "tenureDays": 116,
        "link": "https://carta.com",
        "year": "2022",
        "dateRange": "May ~ Aug, 2022",
        "emoji": DEFAULT_EMOJI,
        "icon": None,
        "iconType": None,
    },
    {
        "id": "virtamove-2021",
        "title": "Software Development Co-op Student (Remote)",
        "company": "VirtaMove Corp.",
        "location": "Ottawa, ON, Canada",
        "startDate": "2021-05-06",
        "endDate": "2021-08-27",
        "tenureDays": 113,
        "link": "https://www.virtamove.com",
        "year": "2021",
        "dateRange": "May ~ Aug, 2021",
        "emoji": DEFAULT_EMOJI,
        "icon": None,
        "iconType": None,
    },
]

# The blog and image collections have no static stand-in.
FALLBACK_BLOG_POSTS: list[dict[str, Any]] = []
FALLBACK_IMAGES: list[dict[str, Any]] = []

# Served by /api/blog/{slug} when the live collection has no matching post.
ARCHIVED_BLOG_POSTS: list[dict[str, Any]] = [
    {
        "id": "hugging-face-agents-journey",
        "title": "My Journey Through Hugging Face AI Agents",
        "slug": "hugging-face-agents-journey",
        "excerpt": (
            "Exploring the world of AI agents through Hugging Face's comprehensive course "
            "series, from fundamentals to advanced implementations."
        ),
        "content": (
            "# My Journey Through Hugging Face AI Agents\n\n"
            "## Introduction\n\n"
            "The world of AI agents has been rapidly evolving, and Hugging Face has been at "
            "the forefront of making these technologies accessible to developers and "
            "researchers alike.\n\n"
            "## Starting with the Fundamentals\n\n"
            "The journey began with the Fundamentals of Agents course, covering agent "
            "architecture, environment interaction, action selection and multi-agent "
            "systems.\n\n"
            "## Diving into Model Context Protocol (MCP)\n\n"
            "The MCP Course introduced context preservation across interactions, memory "
            "mechanisms and protocol design for context sharing.\n\n"
            "## Achieving Excellence\n\n"
            "The journey culminated in the Certificate of Excellence for the complete "
            "Hugging Face Agents Course."
        ),
        "author": "Darcy Liu",
        "publishedAt": "2025-06-20",
        "updatedAt": "2025-06-20",
        "tags": ["AI Agents", "Hugging Face", "Machine Learning", "Certification"],
        "featured": True,
        "readTime": "5 min read",
        "image": (
            "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
            "Hugging%20Face%20Agents%20Course%20Certificate-h7by0WgWsn0t2ppzw1UJSwuqagcWUR.webp"
        ),
        "category": "Learning",
        "icon": None,
        "iconType": None,
        "notionUrl": None,
    },
]

FALLBACK_PROJECTS: list[dict[str, Any]] = [
    {
        "id": "codejedi-portfolio",
        "title": "codejedi.ai Portfolio",
        "description": "Personal portfolio site with content served from Notion databases.",
        "longDescription": (
            "A marketing-style single page site whose work history, blog, projects, skills "
            "and certificates are authored in Notion and served through a small content API."
        ),
        "image": PLACEHOLDER_IMAGE,
        "tags": ["Next.js", "Notion API", "Python"],
        "link": "https://codejedi.ai",
        "github": "https://github.com/codejedi-ai",
        "featured": True,
        "icon": None,
        "iconType": None,
    },
    {
        "id": "hugging-face-agents",
        "title": "Hugging Face Agents Coursework",
        "description": "Agent experiments built while completing the Hugging Face Agents course.",
        "longDescription": (
            "Exercises and small agents covering tool use, planning and the Model Context "
            "Protocol, completed for the Hugging Face Agents certificate track."
        ),
        "image": PLACEHOLDER_IMAGE,
        "tags": ["AI Agents", "Hugging Face", "MCP"],
        "link": "https://huggingface.co/learn/agents-course",
        "github": "https://github.com/codejedi-ai",
        "featured": False,
        "icon": None,
        "iconType": None,
    },
]

FALLBACK_CERTIFICATES: list[dict[str, Any]] = [
    {
        "id": "aws-practitioner",
        "name": "AWS Certified Practitioner",
        "image": "/images/aws-practitioner.png",
        "alt": "AWS Cloud Practitioner Certificate",
        "date": "2 January 2021",
    },
    {
        "id": "aws-developer",
        "name": "AWS Certified Developer",
        "image": "/images/aws-developer.png",
        "alt": "AWS Developer Associate Certificate",
        "date": "29 August 2021",
    },
    {
        "id": "aws-devops-prof",
        "name": "AWS Certified DevOps Engineer - Professional",
        "image": "/images/aws-devops-prof.png",
        "alt": "AWS DevOps Engineer Professional Certificate",
        "date": "23 August 2024",
    },
]

FALLBACK_HUGGING_FACE_CERTIFICATES: list[dict[str, Any]] = [
    {
        "id": "hugging-face-agents-fundamentals",
        "name": "Fundamentals of Agents",
        "fullName": "Certificate of Achievement - Fundamentals of Agents",
        "image": (
            "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
            "AI-Agents-XFoMGnpSB1R3YGGoQvE9VJKu5nYYS8.webp"
        ),
        "alt": "Hugging Face Agents Course - Unit 1: Foundations of Agents Certificate",
        "date": "17 April 2025",
        "description": (
            "Successfully completed Unit 1: Foundations of Agents in the Hugging Face Agents "
            "Course, covering the fundamental concepts of AI agents, their architecture, and "
            "basic implementation principles."
        ),
        "skills": ["AI Agents", "Agent Architecture", "Foundations", "Hugging Face"],
        "courseUnit": "Unit 1",
        "featured": False,
    },
    {
        "id": "mcp-course-unit1",
        "name": "The MCP Course: Unit 1",
        "fullName": "Certificate of Achievement - The MCP Course: Unit 1",
        "image": (
            "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
            "MCP-Cert-KEcApO1IElKuUmbwg4tfO1OPK1tUMv.webp"
        ),
        "alt": "The MCP Course Unit 1 - Fundamentals of MCP Certificate",
        "date": "7 June 2025",
        "description": (
            "Completed the fundamentals of Model Context Protocol (MCP): context management, "
            "protocol design, and implementation strategies for AI systems."
        ),
        "skills": ["Model Context Protocol", "MCP", "Context Management", "AI Systems"],
        "courseUnit": "Unit 1",
        "featured": False,
    },
    {
        "id": "hugging-face-agents-course",
        "name": "Hugging Face AI Agents Course",
        "fullName": "Certificate of Excellence - Hugging Face Agents Course",
        "image": (
            "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
            "Hugging%20Face%20Agents%20Course%20Certificate-h7by0WgWsn0t2ppzw1UJSwuqagcWUR.webp"
        ),
        "alt": "Hugging Face Agents Course Certificate of Excellence",
        "date": "19 June 2025",
        "description": (
            "Certificate of Excellence for the complete Hugging Face Agents Course: advanced "
            "agent development, deployment, and optimization with the Hugging Face ecosystem."
        ),
        "skills": ["AI Agents", "Hugging Face", "Agent Development", "Machine Learning", "NLP"],
        "courseUnit": "Complete Course",
        "featured": True,
    },
]

FALLBACK_ABOUT_IMAGES: list[dict[str, Any]] = [
    {
        "id": "about1",
        "src": (
            "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
            "about1.jpg-TbfdbEe1niYCAR6Fqv7JYcqm2zeKO9.jpeg"
        ),
        "alt": "Kayaking with a Star Wars Rebel Alliance cap",
    },
    {
        "id": "about2",
        "src": (
            "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
            "about2-X48rWZdpV4Q7RxVbbD5F7xRy5JhQdO.jpeg"
        ),
        "alt": "Sailing at the beach with life vest",
    },
    {
        "id": "about3",
        "src": (
            "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
            "about3-9AFwiFVEdtKGJqM9LmWvBQWHcfyyC2.jpeg"
        ),
        "alt": "Building a sand castle on the beach",
    },
    {
        "id": "about4",
        "src": (
            "https://hebbkx1anhila5yf.public.blob.vercel-storage.com/"
            "about4-Vpsom9WTaJ93mBOvtKEjXoCSR1QzC5.jpeg"
        ),
        "alt": "Kayaking in a blue Hydro-Force inflatable kayak",
    },
]

FALLBACK_SKILLS: list[dict[str, Any]] = [
    {
        "id": "programming",
        "title": "Programming Languages",
        "icon": "Code",
        "skills": [
            "C, C++, C#, Java, R and Python",
            "JavaScript, TypeScript, HTML, CSS",
            "SQL, NoSQL",
        ],
    },
    {
        "id": "developer-tools",
        "title": "Developer Tools",
        "icon": "Terminal",
        "skills": [
            "Pycharm, Eclipse, Jupyter Notebook",
            "XCode, Visual Studio, VSCode, Code Blocks",
            "Robot Framework, Git, GitHub",
        ],
    },
    {
        "id": "libraries",
        "title": "Libraries & Frameworks",
        "icon": "Library",
        "skills": [
            "OpenCV, TensorFlow, PyTorch, Scikit-learn",
            "Seaborn, Selenium, Pandas, NumPy, Matplotlib",
            "OpenAIGym, Nengo, React, Next.js",
        ],
    },
    {
        "id": "devops",
        "title": "DevOps",
        "icon": "Server",
        "skills": [
            "CI/CD, GitHub Actions, CodePipeline",
            "Jenkins, Ansible, Docker, Kubernetes",
            "Infrastructure as Code, Terraform",
        ],
    },
    {
        "id": "database",
        "title": "Database",
        "icon": "Database",
        "skills": ["PostgreSQL, MySQL, Aurora", "MongoDB, DynamoDB"],
    },
    {
        "id": "cloud",
        "title": "Cloud",
        "icon": "Cloud",
        "skills": ["AWS (EC2, S3, Lambda, etc.)", "GCP, Azure"],
    },
]

CONTACTS: list[dict[str, Any]] = [
    channel.to_public()
    for channel in (
        ContactChannel(
            id="linkedin",
            name="LinkedIn",
            value="codejediatuw",
            icon="Linkedin",
            href="https://www.linkedin.com/in/codejediatuw/",
            color="bg-primary-blue",
            qr=True,
        ),
        ContactChannel(
            id="instagram",
            name="Instagram",
            value="darcyldx",
            icon="Instagram",
            href="https://www.instagram.com/darcyldx/",
            color="bg-primary-purple",
            qr=True,
        ),
        ContactChannel(
            id="twitter",
            name="X (Twitter)",
            value="@darsboi_cjd",
            icon="Twitter",
            href="https://twitter.com/darsboi_cjd",
            color="bg-dark-lighter",
            qr=True,
        ),
        ContactChannel(
            id="email",
            name="Email",
            value="d273liu@uwaterloo.ca",
            icon="Mail",
            href="mailto:d273liu@uwaterloo.ca",
            color="bg-primary-pink",
        ),
        ContactChannel(
            id="calendly",
            name="Schedule a Meeting",
            value="Calendly",
            icon="Calendar",
            href="https://calendly.com/d273liu/one-on-one",
            color="bg-primary-cyan",
        ),
        ContactChannel(
            id="discord",
            name="Discord",
            value="codejedi",
            icon="MessageSquare",
            href="#",
            color="bg-primary-purple",
        ),
    )
]
