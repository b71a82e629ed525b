"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "iQuiz"
TOPIC_LIST_TITLE: str = "Quizzes"

BUTTON_REFRESH: str = "Refresh"
BUTTON_SETTINGS: str = "Settings"
BUTTON_ABOUT: str = "About"
BUTTON_SUBMIT: str = "Submit"
BUTTON_NEXT: str = "Next"
BUTTON_DONE: str = "Done"
BUTTON_BACK: str = "Back"
BUTTON_CHECK_NOW: str = "Check Now"

SETTINGS_URL_GROUP: str = "Data Source URL"
SETTINGS_URL_PLACEHOLDER: str = "Quiz JSON URL"
SETTINGS_INTERVAL_GROUP: str = "Refresh Interval (minutes)"
SETTINGS_INTERVAL_OFF: str = "Off"

NETWORK_ERROR_TITLE: str = "Network Error"
CORRECT_FEEDBACK: str = "Correct!"
INCORRECT_FEEDBACK: str = "Incorrect."
ANSWER_TEMPLATE: str = "Answer: {answer}"
SCORE_TEMPLATE: str = "Score: {score} of {total}"
PROGRESS_TEMPLATE: str = "Question {number} of {total}"
EMPTY_TOPICS_MESSAGE: str = "No quizzes available. Pull in new content from Settings."

TOPIC_ICON_SIZE: int = 40
