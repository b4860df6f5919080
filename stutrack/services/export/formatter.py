import csv
import io


class CsvRowWriter:
    """
    csv.writer look-alike that separates rows with LINE_TERMINATOR.

    Each row is first rendered with a CRLF terminator. QUOTE_MINIMAL only quotes
    characters found in the delimiter, the quotechar or the terminator, so this
    quotes fields holding either a bare CR or a bare LF.
    """
    QUOTING_TERMINATOR = '\r\n'

    def __init__(self, stream, line_terminator):
        self._stream = stream
        self._line_terminator = line_terminator
        self._buffer = io.StringIO()
        self._writer = csv.writer(self._buffer, quoting=csv.QUOTE_MINIMAL,
                                  lineterminator=self.QUOTING_TERMINATOR)

    def writerow(self, row):
        self._buffer.seek(0)
        self._buffer.truncate()
        self._writer.writerow(row)
        line = self._buffer.getvalue()[:-len(self.QUOTING_TERMINATOR)]
        self._stream.write(line + self._line_terminator)

    def writerows(self, rows):
        for row in rows:
            self.writerow(row)


class ExportFormatter:
    """Handles CSV dialect and cell-level formatting."""
    LINE_TERMINATOR = '\n'

    @staticmethod
    def create_writer(stream):
        return CsvRowWriter(stream, ExportFormatter.LINE_TERMINATOR)

    @staticmethod
    def yes_no(flag):
        return 'Yes' if flag else 'No'

    @staticmethod
    def strip_final_terminator(text):
        """Rows are separated, not terminated, by newlines."""
        if text.endswith(ExportFormatter.LINE_TERMINATOR):
            return text[:-len(ExportFormatter.LINE_TERMINATOR)]
        return text
