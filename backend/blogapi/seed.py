"""Demo data for local environments.

``Seeder.setup`` is idempotent per entity kind: every step first asks the
store whether any row of that kind exists and skips itself if so. The check
and the insert are not atomic, so callers must not run two seeders against
the same database at once (the application runs it once at startup).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Sequence, Tuple

from sqlalchemy.engine import Engine
from sqlmodel import Session

from . import db
from .models import Comment, Post, Role, User, utcnow
from .security import CredentialIssuer, NoCredentials
from .store import SeedStore, SessionStore

logger = logging.getLogger(__name__)


ADMIN_EMAIL = "admin@example.com"
EDITOR_EMAIL = "editor@example.com"
READER_EMAIL = "reader@example.com"

DEMO_USERS: Sequence[Tuple[str, Role]] = (
    (ADMIN_EMAIL, Role.admin),
    (EDITOR_EMAIL, Role.editor),
    ("othereditor@example.com", Role.editor),
    (READER_EMAIL, Role.reader),
)


@dataclass(frozen=True)
class PostSeed:
    title: str
    content: str
    # published_at relative to now; None seeds a draft
    published_offset: Optional[timedelta] = timedelta(0)


PUBLISHED_POSTS: Sequence[PostSeed] = (
    PostSeed(
        title="First post",
        content="""## Hello Python
Have you ever wondered how to make a hello-world application in Python?

The answer is simply:
```py
print('Hello World!')
```
""" + " " * 20,
        published_offset=timedelta(days=-1),
    ),
    PostSeed(
        title="First post",
        content="""
# Linux (CLI)

## Files and folders

The file system key in Linux.

```bash
# Change directory
cd Documents

# Navigate to parent folder
cd .

# Go to home (your users) folder
cd ~

# Print current working directory
pwd

# List files
ls

# List files in a specific directory
ls Documents

# List files with details (long)
ls -l

# List hidden files also
ls -a
# NOTE: hidden files start with a "." (dot)

# Make an empty file
touch file.txt
# NOTE: actually "touch" is meant to update the last accessed/modified timestamp, but it will also create the file if it doesn't exist.

# Append some text to a file
echo "Hello World" >> file.txt

# Print content of a file
cat file1.txt

# Print concatenated content of several files
cat file1.txt file2.txt

# Scroll through a file
less file.txt

# Remove a file
rm file.txt

# Remove a directory and all of its contents (no trash/recycle bin)
rm - r Documents
```
""" + " " * 16,
    ),
    PostSeed(
        title="Docker Intro",
        content="""# Docker CLI Introduction

## Commands

This section contains a list of useful docker commands.
It is only for reference.
You don't have to type them (yet).

Parameters in angle brackets are replaced by user input.
Example: `<image>`

### Shell

Run a shell from a container image.

```bash
docker run -it --rm <image> sh
```

### Show containers

Show running containers.

```bash
docker ps
```

Show all containers, even those that are not actively running.

```bash
docker ps
```

### Shell in running container

```bash
docker exec -it <id or name> sh
```

You can find ID and Name with `docker ps` command.

### Show logs

```bash
docker logs <id or name>
```

### Build an image

```bash
docker build <directory>
```

Where `<directory>` is a folder containing a `Dockerfile`.

It will create with a long HEX code as name.

You can name and version an image by tagging it.

```bash
docker build --tag <name>:<version> <directory>
```
""" + " " * 20,
    ),
)

DRAFT_POST = PostSeed(title="Draft", content="This is a draft post", published_offset=None)

FIRST_COMMENT = "First one to comment"


def username_from_email(email: str) -> str:
    return email.split("@", 1)[0]


@dataclass
class SeedReport:
    users: int = 0
    posts: int = 0
    comments: int = 0

    @property
    def total(self) -> int:
        return self.users + self.posts + self.comments


class Seeder:
    """Populate an empty blog database with demo users, posts and a comment."""

    def __init__(
        self,
        store: SeedStore,
        credentials: Optional[CredentialIssuer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.store = store
        self.credentials = credentials or NoCredentials()
        self.clock = clock or utcnow

    def setup(self) -> SeedReport:
        report = SeedReport()
        self.store.ensure_schema()

        if not self.store.any(User):
            report.users = self._create_users(DEMO_USERS)
            self.store.save()
        else:
            logger.debug("Users already present, skipping")

        now = self.clock()
        if not self.store.any(Post, Post.published_at.is_not(None)):
            admin = self.store.single(User, email=ADMIN_EMAIL)
            report.posts += self._add_posts(PUBLISHED_POSTS, admin, now)
        else:
            logger.debug("Published posts already present, skipping")

        if not self.store.any(Post, Post.published_at.is_(None)):
            editor = self.store.single(User, email=EDITOR_EMAIL)
            report.posts += self._add_posts([DRAFT_POST], editor, now)
        else:
            logger.debug("Draft post already present, skipping")
        self.store.save()

        if not self.store.any(Comment):
            reader = self.store.single(User, email=READER_EMAIL)
            post = self.store.first(Post)
            self.store.add_all([Comment(content=FIRST_COMMENT, author_id=reader.id, post_id=post.id)])
            self.store.save()
            report.comments = 1
            logger.info("Seeded comment on post %s", post.id)
        else:
            logger.debug("Comments already present, skipping")

        return report

    def _create_users(self, users: Sequence[Tuple[str, Role]]) -> int:
        rows: List[User] = []
        for email, role in users:
            user = User(
                username=username_from_email(email),
                email=email,
                email_confirmed=True,
                role=role,
            )
            self.credentials.issue(user)
            rows.append(user)
        self.store.add_all(rows)
        logger.info("Seeded %d demo users", len(rows))
        return len(rows)

    def _add_posts(self, seeds: Sequence[PostSeed], author: User, now: datetime) -> int:
        rows: List[Post] = []
        for seed in seeds:
            if seed.published_offset is None:
                rows.append(Post(title=seed.title, content=seed.content, author_id=author.id, created_at=now))
                continue
            published_at = now + seed.published_offset
            rows.append(
                Post(
                    title=seed.title,
                    content=seed.content,
                    author_id=author.id,
                    created_at=published_at,
                    updated_at=now,
                    published_at=published_at,
                )
            )
        self.store.add_all(rows)
        logger.info("Seeded %d posts by %s", len(rows), author.email)
        return len(rows)


def seed_demo_data(
    engine: Optional[Engine] = None,
    credentials: Optional[CredentialIssuer] = None,
) -> SeedReport:
    """Run the seeder once against ``engine`` (the application engine by default)."""
    target = engine or db.engine
    with Session(target) as session:
        report = Seeder(SessionStore(session, target), credentials=credentials).setup()
    if report.total:
        logger.info("Demo data seeded: %s", report)
    else:
        logger.info("Demo data already present")
    return report
