"""Built-in content used when no event file can be loaded from disk."""

from __future__ import annotations

from typing import Any

from .models import GameEvent, Trait

_TRAITS: list[dict[str, Any]] = [
    {
        "name": "Algorithm Ace",
        "description": "Algorithms +15 / Programming +5",
        "programmingSkillBonus": 5,
        "algorithmSkillBonus": 15,
    },
    {
        "name": "Debugging Expert",
        "description": "Debugging +15 / Stress -5",
        "debuggingSkillBonus": 15,
        "stressDelta": -5,
    },
    {
        "name": "Natural Communicator",
        "description": "Communication +15 / Motivation +5",
        "communicationSkillBonus": 15,
        "motivationDelta": 5,
    },
    {
        "name": "Full-Stack Engineer",
        "description": "Programming +10 / Debugging +10",
        "programmingSkillBonus": 10,
        "debuggingSkillBonus": 10,
    },
    {
        "name": "Learning Machine",
        "description": "All skills +5 / Health -5",
        "programmingSkillBonus": 5,
        "algorithmSkillBonus": 5,
        "debuggingSkillBonus": 5,
        "communicationSkillBonus": 5,
        "healthDelta": -5,
    },
    {
        "name": "Work-Life Balance",
        "description": "Health +10 / Stress -10",
        "healthDelta": 10,
        "stressDelta": -10,
    },
]

_EVENTS: list[dict[str, Any]] = [
    {
        "id": "first-day",
        "title": "First Day at Work",
        "description": "You just joined a new tech company and feel both excited and nervous.",
        "tags": ["starter"],
        "options": [
            {
                "text": "Introduce yourself to the team",
                "effectDescription": "You chat with your new teammates, the mood warms up and you relax a lot.",
                "communicationSkillDelta": 5,
                "stressDelta": -3,
            },
            {
                "text": "Dive straight into the code",
                "effectDescription": "You bury yourself in the codebase and understand the project better, a little tense.",
                "programmingSkillDelta": 4,
                "stressDelta": 2,
            },
        ],
    },
    {
        "id": "first-project",
        "title": "Your First Project",
        "description": "Your manager hands you your first project. The deadline is tight.",
        "tags": ["starter"],
        "options": [
            {
                "text": "Work overtime to finish",
                "effectDescription": "You pull all-nighters and ship on time. Your skills grow but your body complains.",
                "programmingSkillDelta": 5,
                "stressDelta": 8,
                "healthDelta": -5,
            },
            {
                "text": "Ask for an extension",
                "effectDescription": "You negotiate more time with your manager, though some teammates grumble.",
                "communicationSkillDelta": 4,
                "motivationDelta": -3,
            },
        ],
    },
    {
        "id": "code-review-prep",
        "title": "Code Review",
        "description": "Your code is up for team review and you want to make a good impression.",
        "options": [
            {
                "text": "Self-review in advance",
                "effectDescription": "Careful self-testing uncovers hidden bugs. Your debugging improves at some cost.",
                "debuggingSkillDelta": 5,
                "stressDelta": 2,
            },
            {
                "text": "Ask a senior colleague",
                "effectDescription": "A senior engineer helps you out and teaches you a few tricks on the way.",
                "communicationSkillDelta": 4,
                "programmingSkillDelta": 2,
            },
        ],
    },
    {
        "id": "tech-talk",
        "title": "Tech Talk",
        "description": "The company hosts a tech talk and you are invited to present your project.",
        "options": [
            {
                "text": "Polish the slides",
                "effectDescription": "The talk is a hit and your reputation grows, but preparing it was stressful.",
                "communicationSkillDelta": 6,
                "programmingSkillDelta": 3,
                "stressDelta": 3,
            },
            {
                "text": "Improvise",
                "effectDescription": "Not perfect, but your enthusiasm is contagious and you feel accomplished.",
                "communicationSkillDelta": 3,
                "motivationDelta": 5,
            },
            {
                "text": "Politely decline",
                "effectDescription": "You dodge the stage fright but miss a chance to shine, and feel a bit down.",
                "stressDelta": -2,
                "motivationDelta": -3,
            },
        ],
    },
    {
        "id": "production-bug",
        "title": "Production Bug",
        "description": "A serious bug hits production in your system. Complaints keep pouring in.",
        "options": [
            {
                "text": "Hotfix it right now",
                "effectDescription": "Under huge pressure you patch it. Debugging soars, your health takes a hit.",
                "debuggingSkillDelta": 8,
                "stressDelta": 10,
                "healthDelta": -5,
            },
            {
                "text": "Find the root cause first",
                "effectDescription": "You dig into the algorithm and fix the real problem, still under pressure.",
                "debuggingSkillDelta": 5,
                "algorithmSkillDelta": 3,
                "stressDelta": 5,
            },
        ],
    },
    {
        "id": "tech-stack-meeting",
        "title": "Tech Stack Meeting",
        "description": "The team must choose a new tech stack and you are invited to the discussion.",
        "options": [
            {
                "text": "Research and recommend",
                "effectDescription": "A data-driven proposal shows off both your technical and people skills.",
                "algorithmSkillDelta": 4,
                "communicationSkillDelta": 5,
                "programmingSkillDelta": 3,
            },
            {
                "text": "Go with the mainstream",
                "effectDescription": "The popular choice is unremarkable but safe, and the pressure stays low.",
                "programmingSkillDelta": 2,
                "stressDelta": -2,
            },
        ],
    },
    {
        "id": "refactoring",
        "title": "Refactoring",
        "description": "The project is full of legacy code that needs refactoring, but time is short.",
        "options": [
            {
                "text": "Refactor over the weekend",
                "effectDescription": "Several late nights later the core module shines, and you are exhausted.",
                "programmingSkillDelta": 7,
                "debuggingSkillDelta": 4,
                "stressDelta": 6,
                "healthDelta": -3,
            },
            {
                "text": "Refactor step by step",
                "effectDescription": "You improve the code bit by bit alongside regular work, a little extra load.",
                "programmingSkillDelta": 4,
                "stressDelta": 2,
            },
            {
                "text": "Leave it for now",
                "effectDescription": "Less pressure today, but you know the tech debt is piling up.",
                "stressDelta": -3,
                "motivationDelta": -2,
            },
        ],
    },
    {
        "id": "interviewing",
        "title": "Interviewing a Candidate",
        "description": "You are asked to run a technical interview and assess a candidate.",
        "options": [
            {
                "text": "Design an algorithm puzzle",
                "effectDescription": "Crafting a clever puzzle sharpens your own algorithmic thinking.",
                "algorithmSkillDelta": 5,
                "communicationSkillDelta": 3,
            },
            {
                "text": "Discuss past projects",
                "effectDescription": "A careful conversation improves your communication and refreshes your knowledge.",
                "communicationSkillDelta": 6,
                "programmingSkillDelta": 2,
            },
        ],
    },
    {
        "id": "performance-tuning",
        "title": "Performance Tuning",
        "description": "The system has slowed down and needs optimising.",
        "options": [
            {
                "text": "Profile the bottleneck",
                "effectDescription": "Profilers reveal a deep bottleneck. You solve it, but it was brain-melting.",
                "algorithmSkillDelta": 7,
                "debuggingSkillDelta": 5,
                "stressDelta": 4,
            },
            {
                "text": "Apply quick wins",
                "effectDescription": "A few simple tweaks help, though the root problem remains.",
                "programmingSkillDelta": 4,
                "debuggingSkillDelta": 3,
                "stressDelta": 2,
            },
        ],
    },
    {
        "id": "new-framework",
        "title": "Learning a New Framework",
        "description": "The company adopts a new framework and everyone has to learn it.",
        "options": [
            {
                "text": "Study it properly",
                "effectDescription": "Systematic study broadens your stack considerably, with some added stress.",
                "programmingSkillDelta": 6,
                "algorithmSkillDelta": 4,
                "stressDelta": 3,
            },
            {
                "text": "Learn on the job",
                "effectDescription": "You muddle through in the project and pick up a few debugging lessons.",
                "programmingSkillDelta": 3,
                "debuggingSkillDelta": 2,
            },
        ],
    },
    {
        "id": "team-conflict",
        "title": "Team Conflict",
        "description": "Teammates disagree on the technical approach and the atmosphere is tense.",
        "options": [
            {
                "text": "Mediate",
                "effectDescription": "You step in and resolve the conflict. It costs energy but earns respect.",
                "communicationSkillDelta": 8,
                "stressDelta": 5,
                "motivationDelta": 3,
            },
            {
                "text": "Stay neutral",
                "effectDescription": "You stay out of it, but watching the team split drains your morale.",
                "stressDelta": -2,
                "motivationDelta": -2,
            },
        ],
    },
    {
        "id": "annual-review",
        "title": "Annual Review",
        "description": "Performance review season is here and you need to write your self-assessment.",
        "allowRepeat": True,
        "options": [
            {
                "text": "Prepare thoroughly",
                "effectDescription": "A clear report of your impact wins you a raise, after a lot of hard work.",
                "communicationSkillDelta": 5,
                "salaryDelta": 2000,
                "stressDelta": 3,
            },
            {
                "text": "Keep it short",
                "effectDescription": "A quick write-up still earns a small raise and costs you little.",
                "salaryDelta": 1000,
                "stressDelta": -2,
            },
        ],
    },
    {
        "id": "open-source",
        "title": "Open Source Contribution",
        "description": "You found a bug in an open source project and wonder whether to submit a fix.",
        "tags": ["innovation"],
        "options": [
            {
                "text": "Open a pull request",
                "effectDescription": "The community welcomes your fix and your sense of achievement soars.",
                "programmingSkillDelta": 5,
                "debuggingSkillDelta": 4,
                "motivationDelta": 6,
            },
            {
                "text": "Patch it locally",
                "effectDescription": "You fix it for yourself and skip the hassle of a pull request.",
                "debuggingSkillDelta": 3,
            },
        ],
    },
    {
        "id": "tech-debt",
        "title": "Technical Debt",
        "description": "The project has accumulated a mountain of technical debt.",
        "options": [
            {
                "text": "Draft a refactoring plan",
                "effectDescription": "You convince the team to adopt a plan, showing vision and influence.",
                "programmingSkillDelta": 5,
                "algorithmSkillDelta": 3,
                "communicationSkillDelta": 4,
            },
            {
                "text": "Handle the urgent parts",
                "effectDescription": "You put out the worst fires, but the debt remains and it weighs on you.",
                "debuggingSkillDelta": 4,
                "stressDelta": 3,
            },
        ],
    },
    {
        "id": "cross-team",
        "title": "Cross-Team Collaboration",
        "description": "A large project requires working with other departments.",
        "options": [
            {
                "text": "Coordinate actively",
                "effectDescription": "You become the bridge between teams and the project runs smoothly.",
                "communicationSkillDelta": 7,
                "programmingSkillDelta": 3,
                "motivationDelta": 4,
            },
            {
                "text": "Just do your part",
                "effectDescription": "Passive cooperation keeps things slow and leaves you unhappy.",
                "communicationSkillDelta": 2,
                "stressDelta": 3,
            },
        ],
    },
    {
        "id": "tech-blog",
        "title": "Tech Blog",
        "description": "You consider writing a blog post about your experience.",
        "options": [
            {
                "text": "Write it carefully",
                "effectDescription": "A polished article raises your profile and clarifies your own thinking.",
                "communicationSkillDelta": 6,
                "programmingSkillDelta": 4,
                "motivationDelta": 5,
            },
            {
                "text": "Jot down some notes",
                "effectDescription": "A few quick notes. Limited reach, still worth keeping.",
                "communicationSkillDelta": 2,
                "programmingSkillDelta": 2,
            },
        ],
    },
    {
        "id": "reviewing-code",
        "title": "Reviewing a Colleague's Code",
        "description": "You need to review a pull request from a teammate.",
        "options": [
            {
                "text": "Review thoroughly",
                "effectDescription": "You catch several logic flaws and earn the team's appreciation, tiring though it was.",
                "debuggingSkillDelta": 5,
                "communicationSkillDelta": 4,
                "stressDelta": 2,
            },
            {
                "text": "Approve quickly",
                "effectDescription": "You rubber-stamp it and avoid extra work, but something feels off.",
                "stressDelta": -2,
                "motivationDelta": -2,
            },
        ],
    },
    {
        "id": "tech-conference",
        "title": "Tech Conference",
        "description": "The company sends you to a tech conference to learn about new technology.",
        "options": [
            {
                "text": "Network and take notes",
                "effectDescription": "You trade ideas with experts and come back full of energy.",
                "programmingSkillDelta": 5,
                "algorithmSkillDelta": 5,
                "communicationSkillDelta": 6,
                "motivationDelta": 5,
            },
            {
                "text": "Drift between talks",
                "effectDescription": "You catch a few talks and learn a little.",
                "programmingSkillDelta": 2,
                "algorithmSkillDelta": 2,
            },
        ],
    },
    {
        "id": "launch-day",
        "title": "Launch Day",
        "description": "The project you own is about to go live and everything must go smoothly.",
        "options": [
            {
                "text": "Stay up all night",
                "effectDescription": "You guard the launch overnight and earn a bonus, at a high price in health.",
                "debuggingSkillDelta": 6,
                "stressDelta": 8,
                "healthDelta": -5,
                "salaryDelta": 1500,
            },
            {
                "text": "Prepare a rollback plan",
                "effectDescription": "Careful preparation and a rollback plan keep last-minute stress down.",
                "debuggingSkillDelta": 4,
                "programmingSkillDelta": 3,
                "stressDelta": 3,
            },
        ],
    },
    {
        "id": "career-planning",
        "title": "Career Planning",
        "description": "You start thinking about where your career should go.",
        "options": [
            {
                "text": "Go deep on technology",
                "effectDescription": "You commit to becoming a senior expert and hone your core skills.",
                "algorithmSkillDelta": 6,
                "programmingSkillDelta": 5,
                "motivationDelta": 4,
            },
            {
                "text": "Move into management",
                "effectDescription": "You start learning project management and leadership and look forward to it.",
                "communicationSkillDelta": 8,
                "motivationDelta": 3,
            },
            {
                "text": "Keep things as they are",
                "effectDescription": "You are content with the status quo and the pressure eases.",
                "stressDelta": -3,
            },
        ],
    },
    {
        "id": "burnout-spiral",
        "title": "Work Burnout",
        "description": "Endless overtime has worn you out and your productivity is dropping.",
        "tags": ["burnout", "health"],
        "options": [
            {
                "text": "Take time off",
                "effectDescription": "You take a decisive break, recharge and find your passion again.",
                "healthDelta": 10,
                "stressDelta": -8,
                "motivationDelta": 5,
            },
            {
                "text": "Push through",
                "effectDescription": "You grit your teeth and finish the work, but body and mind get worse.",
                "healthDelta": -5,
                "stressDelta": 5,
                "motivationDelta": -3,
            },
        ],
    },
    {
        "id": "skill-up",
        "title": "Leveling Up",
        "description": "You decide to invest time in improving your skills.",
        "options": [
            {
                "text": "Study advanced algorithms",
                "effectDescription": "A whole weekend of hard problems leaves you feeling reborn.",
                "algorithmSkillDelta": 8,
                "stressDelta": 3,
            },
            {
                "text": "Learn a new framework",
                "effectDescription": "You master the latest frontend framework and your output jumps.",
                "programmingSkillDelta": 6,
                "debuggingSkillDelta": 3,
            },
            {
                "text": "Practise public speaking",
                "effectDescription": "Speaking practice pays off and the team mood becomes more upbeat.",
                "communicationSkillDelta": 7,
                "motivationDelta": 4,
            },
        ],
    },
]


def default_traits() -> list[Trait]:
    return [Trait.model_validate(payload) for payload in _TRAITS]


def default_events() -> list[GameEvent]:
    return [GameEvent.model_validate(payload) for payload in _EVENTS]
