# coursebook

Tools for mdBook books that are taught as courses. The chapters of a book are
grouped into a hierarchy:

```
Courses      all courses of the book
  Course     the level of content students enroll in
    Session  a block of instructional time (a morning or an afternoon)
      Segment  a top-level chapter and the slides under it
        Slide  a single topic (a chapter and any sub-chapters under it)
```

The structure comes from the order of chapters in `SUMMARY.md` together with
YAML frontmatter at the top of each chapter:

```markdown
---
course: Fundamentals
session: Day 1 Morning
minutes: 10
target_minutes: 180
---

# Welcome
```

* `course` starts a new course; `course: none` leaves course material. Once a
  course is current, a `session` must be set too, or a
  `CourseStructureError` is raised.
* `session` starts a new session within the current course. Sessions and
  courses with the same name are merged.
* `minutes` is the teaching time of a slide (a non-negative integer).
* `target_minutes` adds to the intended length of the session.

Sub-slides may not set `course` or `session`. Frontmatter that is not valid
YAML, is not a mapping, or holds values of the wrong type raises
`FrontmatterError`.

## Installation

```
pip install .
```

## Commands

### `mdbook-course`

An mdBook preprocessor. Register it in `book.toml`:

```toml
[preprocessor.course]
command = "mdbook-course"
```

`mdbook-course supports <renderer>` exits with status 0 for every renderer.
Without a subcommand it reads mdBook's `[context, book]` JSON from standard
input, strips frontmatter from every chapter, and writes the processed book as
JSON to standard output. Errors are printed to standard error with exit
status 1.

While doing so it:

* adds the teaching time of a slide to its speaker notes: in the slide's first
  chapter, a line such as `This slide should take about 10 minutes.` is put
  after each `<details>` tag (`and its sub-slides` is added when the slide
  spans several chapters). Slides with no minutes are left alone;
* replaces the first directive in each chapter with generated Markdown:
  * `{{%session outline}}` — the segments of the current session, with times;
  * `{{%segment outline}}` — the slides of the current segment, with times;
  * `{{%course outline}}` — the schedule of the current course;
  * `{{%course outline NAME}}` — the schedule of the named course (left
    untouched when no course has that name).

  Any other directive is replaced by its own text.

Session times include 10-minute breaks between segments that have any
minutes. Times over five minutes are rounded up to the next five minutes.

### `course-schedule`

Prints a Markdown summary of each course that has a target, and of its
sessions, comparing durations with targets (a course may be 15 minutes off, a
session 5, before it is marked as too long or short):

```
course-schedule [ROOT]
```

`ROOT` is the book's root directory, `.` by default.

### `course-content`

Prints the source of every slide of every course, in course order, under
`# COURSE:`, `# SESSION:`, `# SEGMENT:` and `# SLIDE:` headings. Slide sources
are read from `ROOT/src`:

```
course-content [ROOT]
```

### `mdbook-exerciser`

An mdBook renderer that extracts exercise files from the book. Configure it in
`book.toml`:

```toml
[output.exerciser]
output-directory = "comprehensive-exercises"
```

In a chapter, put a comment naming a file before a code block:

````markdown
<!-- File src/main.rs -->

```rust
fn main() {}
```
````

The next code block (fenced or indented) after the comment is written to that
file, inside a directory named after the chapter's file stem, inside the
output directory. The output directory is removed and created again on each
run. Code blocks without a preceding comment are ignored.

### `collatz-length` and `parse-expression`

Two small exercise programs:

```
collatz-length [N]          # prints "Length: 15" for the default N = 11
parse-expression [EXPR]     # prints the parse tree of "10+foo+20-30" by default
```

`parse-expression` accepts lower-case identifiers, unsigned 32-bit numbers,
`+` and `-`, with operators grouping to the right; on bad input it prints an
error and exits with status 1.

## Library use

```python
from coursebook.book import load_book
from coursebook.course import Courses
from coursebook.markdown import duration, relative_link

book = load_book(".")
courses, book = Courses.extract_structure(book)
for course in courses:
    print(course.name, duration(course.minutes()))
    print(course.schedule("index.md"))

relative_link("references/foo.md", "hello-world.md")  # "../hello-world.md"
duration(61)                                          # "1 hour and 5 minutes"
```

Modules:

* `coursebook.book` — `Book`, `Chapter`, `PartTitle`, `Separator`, with
  `from_dict`/`to_dict` for mdBook's JSON; `load_book(root)` and
  `parse_preprocessor_input(stream)`.
* `coursebook.frontmatter` — `Frontmatter`, `split_frontmatter(chapter)`.
* `coursebook.course` — `Courses`, `Course`, `Session`, `Segment`, `Slide`.
* `coursebook.timing_info` — `insert_timing_info(slide, chapter)`.
* `coursebook.replacements` — `replace(courses, course, session, segment, chapter)`.
* `coursebook.preprocessor` — `preprocess(book)`.
* `coursebook.schedule` — `timediff(actual, target, slop)`, `format_summary(course)`.
* `coursebook.content` — `render_content(courses, src_dir)`.
* `coursebook.exerciser` — `process(output_directory, text)`,
  `process_all(book, output_directory)`.
* `coursebook.collatz` — `collatz_length(n)`.
* `coursebook.expression` — `tokenize(text)`, `parse(text)`.

## Limits

`load_book` reads `SUMMARY.md` with a simple line-based reader: a book title
heading, part-title headings, separators, prefix and suffix chapter links and
nested bulleted links, with the source directory taken from `src` under
`[book]` in `book.toml`. It does not render the book; the commands only
produce Markdown, JSON or extracted files.