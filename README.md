# qaforum

The data model of a small question-and-answer forum, written against the
standard library only. It has no user interface. It covers:

- **Questions** (`qaforum.question`): a `Question` dataclass holds
  `info_id`, `user_id`, `date_time`, `content`, `title` and the set of
  `answers` it received. Change that set with `add_answer`, `delete_answer`
  and `clear_answers`. `write_info(data_dir)` stores a question as four text
  files under `data_dir/questions/` (`answerList/`, `title/`, `detail/`,
  `information/`, each holding `<info_id>.txt`) and creates the directories
  if they are missing. `read_info(data_dir)` loads them back. If the date
  file is empty, the date falls back to `DEFAULT_DATE_TIME`
  (2000-01-01 12:00:00). `read_question_owners` and `write_question_owners`
  handle the file that maps question ids to asker ids. A missing file reads
  as an empty map.
- **Users** (`qaforum.user`): a `User` dataclass records fans, followed users
  and questions, and the user's own questions and answers. It offers
  `add_fan`/`remove_fan`, `follow_user`/`unfollow_user`,
  `follow_question`/`unfollow_question`, `add_question`, `add_answer`,
  `is_followed_by` and `is_following_question`. `praise_total(praise_counts)`
  sums the praise of the user's answers from a mapping you supply.
  `answer_for_question(answer_to_question, question_id)` returns the user's
  answer id for a question, or `None`. `read_name_to_id`,
  `write_name_to_id`, `read_passwords` and `write_passwords` handle the
  whitespace-separated name and password-digest files. `check_user_password`
  checks a login against those maps with a digest function you pass in.
- **Accounts** (`qaforum.accounts`): `AccountStore.register(user_name,
  password, password_again)` strips its inputs and returns the new user id.
  It raises `RegistrationError`, a `ValueError` whose `field` names the bad
  input, if the name is empty or taken, if the password is not 6 to 18 ASCII
  letters and digits (`validate_password`), or if the confirmation differs.
  Passwords are stored as `md5_digest` hex strings by default.
  `AccountStore.check` checks a login. The next free ids live in `Counters`
  (`user_id`, `answer_id`, `question_id`). `load_counters` and
  `save_counters` read and write them from the `[General]` section of an INI
  file. If the store is given a `settings_path`, it saves the counters after
  each registration.
- **Paging** (`qaforum.paging`): `Pager(page_size, items)` splits a list into
  pages. `next_page`, `previous_page` and `go_to(page)` return whether the
  page changed. `go_to` raises `ValueError` for a page outside
  `1..page_count`. `window()` returns the current page's items, and
  `current_page` and `page_count` report the position. `reset(items)`
  replaces the items and returns to page 1.
- **Search** (`qaforum.search`): these functions take a mapping of ids to
  `Question` and return ids ordered oldest first:
  - `search_by_title` finds questions whose title contains the text.
  - `search_by_date_range` finds questions dated between two datetimes,
    both ends included.
  - `all_question_ids` returns every id in the owner map.
  - `sort_by_date` orders any list of ids.

  `SearchMode` (`TITLE`, `DATE_TIME`) names the two kinds of search.
- **Text limits** (`qaforum.textlimit`): `limit_text(text, limit=50)` cuts
  text to at most `limit` characters.

## What it does not do

- There is no command, window or server.
- Answers are not modelled as objects and are not stored. Praise counts and
  answer-to-question links are plain mappings that the caller provides.
- User profiles (name, birthday, gender, introduction and the relation sets)
  are kept in memory only. Only the name map and the password digests have
  file readers and writers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from qaforum.accounts import AccountStore
from qaforum.paging import Pager
from qaforum.textlimit import limit_text

store = AccountStore()
password = "password"
user_id = store.register("alice", password, password)   # 0
store.check("alice", password)                          # True

pager = Pager(2, [1, 2, 3, 4, 5])
pager.window()        # [1, 2]
pager.next_page()     # True
pager.window()        # [3, 4]
pager.go_to(3)        # True
pager.window()        # [5]

limit_text("hello world", 5)   # "hello"
```