"""Наборы текстов для тестирования.

Тексты подобраны так, чтобы характерная буква своего языка
(y, ы, і) встречалась в них заметно чаще остальных.
"""

SAMPLE_ENGLISH_TEXT = """
Every year the city hosts a lively festival of the arts.
Many young people enjoy the music, and they stay until the early morning.
Yesterday the mayor said the festival is the best day of the year.
""".strip()


SAMPLE_RUSSIAN_TEXT = """
Мы были рады, что вы пришли. Это был тёплый и тихий вечер.
Дети играли у воды, а мы сидели на берегу и смотрели на быструю реку.
""".strip()


SAMPLE_UKRAINIAN_TEXT = """
Ці історії про місто і його мешканців дуже цікаві.
Ввечері ми слухали пісні і дивилися на зірки над містом.
""".strip()


SAMPLE_HTML_TEXT = """
<html>
  <head>
    <title>Weekly report</title>
    <style>body { color: gray; }</style>
    <script>var tracking = "analytics";</script>
  </head>
  <body>
    <p>The weekly report is ready.</p>
    <p>Every team delivered the report <strong>early</strong>.</p>
    <script>console.log("hidden");</script>
  </body>
</html>
""".strip()
