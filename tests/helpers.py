"""
A small audit export and an in-memory catalog shared by the tests.
"""

SAMPLE_AUDIT = """
<html><body>
<div class="requirement">
  <div class="reqTitle">  CSE CORE COURSES  </div>
  <table class="completedCourses">
    <tr class="takenCourse">
      <td class="term">AU23</td><td class="course">CSE 2231H</td>
      <td class="credit">4.0</td><td class="grade">A</td>
    </tr>
    <tr class="takenCourse">
      <td class="term">SP24</td><td class="course">2321</td>
      <td class="credit">3.0</td><td class="grade">B+</td>
    </tr>
    <tr class="takenCourse ip">
      <td class="term">AU25</td><td class="course">CSE 3241</td>
      <td class="credit">3.0</td><td class="grade"></td>
    </tr>
  </table>
  <div class="subreqNeeds">
    <span class="course draggable">CSE 3341</span>
    <span class="course draggable">3901</span>
  </div>
</div>
<div class="requirement">
  <div class="reqTitle">General Education Reflection</div>
  <table class="completedCourses">
    <tr class="takenCourse"><td class="course">GENED 1201</td></tr>
  </table>
</div>
<div class="requirement">
  <div class="reqTitle">MATHEMATICS</div>
  <table class="completedCourses">
    <tr class="takenCourse">
      <td class="term">AU22</td><td class="course">MATH 1151</td>
      <td class="credit">5</td><td class="grade">A-</td>
    </tr>
  </table>
  <table class="completedCourses">
    <tr class="takenCourse">
      <td class="term">SP23</td><td class="course">1172</td>
      <td class="credit">n/a</td>
    </tr>
  </table>
</div>
<div class="requirement">
  <div class="reqTitle">TECHNICAL ELECTIVES</div>
  <span class="course draggable">CSE
     5241</span>
</div>
</body></html>
"""


def course(subject, number, units=3, course_id=None, title=None, **extra):
    """A catalog record shaped like the class-search API returns it."""
    record = {
        "subject": subject,
        "catalogNumber": number,
        "title": title or f"{subject} {number} title",
        "maxUnits": units,
        "description": f"About {subject} {number}",
        "courseId": course_id or f"{subject}-{number}",
    }
    record.update(extra)
    return record


class FakeCatalog:
    """
    In-memory stand-in for CatalogClient.

    `results` maps (term, campus_filter) to a candidate list, or to an
    exception instance to raise. Missing keys return no candidates. Every
    call is recorded in `calls`.
    """

    def __init__(self, results=None, by_query=None):
        self.results = results or {}
        self.by_query = by_query or {}
        self.calls = []

    async def search(self, subject, number, term, campus_filter=True):
        self.calls.append((subject, number, term, campus_filter))
        key = (term, campus_filter)
        if self.by_query:
            outcome = self.by_query.get((subject, number), {}).get(key, [])
        else:
            outcome = self.results.get(key, [])
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)

    def close(self):
        pass

