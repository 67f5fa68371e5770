# -----------------------------------------------------------------------------
# es7s/icat [Concatenate files and print them to the standard output]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import errno
import io
import unittest
from unittest import mock

from icat.byteio import DisplayOptions, TransformState, StreamTransformer, Writer
from icat.common import ReadError, WriteError
from icat.settings import SettingsManager


def transform(*sources: bytes, chunk_size: int = 4096, **options) -> bytes:
    sink = io.BytesIO()
    transformer = StreamTransformer(DisplayOptions(**options), TransformState(), Writer(sink), chunk_size)
    for source in sources:
        transformer.transform(io.BytesIO(source))
    return sink.getvalue()


class TransformerPassthroughTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_all_bytes_unchanged(self):
        raw = bytes(range(0x100)) * 3 + b'\n\n\n\t\t\n'
        self.assertEqual(transform(raw), raw)

    def test_unchanged_with_small_chunks(self):
        raw = b'first\n\n\nsecond\x00\xff\r\nno newline at the end'
        self.assertEqual(transform(raw, chunk_size=3), raw)

    def test_empty_source(self):
        self.assertEqual(transform(b''), b'')

    def test_several_sources_concatenated(self):
        self.assertEqual(transform(b'abc', b'', b'def\n'), b'abcdef\n')

    def test_chunks_written_as_read(self):
        sink = mock.Mock()
        state = TransformState()
        transformer = StreamTransformer(DisplayOptions(), state, Writer(sink), chunk_size=4)

        transformer.transform(io.BytesIO(b'\x01\n\n\nabcd'))

        self.assertEqual([c.args[0] for c in sink.write.call_args_list], [b'\x01\n\n\n', b'abcd'])
        self.assertEqual(state, TransformState())


class TransformerNumberingTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_number(self):
        self.assertEqual(transform(b'a\nb\n', number=True), b'     1\ta\n     2\tb\n')

    def test_number_blank_lines(self):
        self.assertEqual(transform(b'a\n\nb\n', number=True), b'     1\ta\n     2\t\n     3\tb\n')

    def test_number_last_line_without_newline(self):
        self.assertEqual(transform(b'a\nb', number=True), b'     1\ta\n     2\tb')

    def test_number_nonblank(self):
        self.assertEqual(transform(b'a\n\nb\n', number_nonblank=True), b'     1\ta\n\n     2\tb\n')

    def test_number_nonblank_takes_precedence(self):
        result = transform(b'a\n\n\nb\n', number=True, number_nonblank=True)
        self.assertEqual(result, b'     1\ta\n\n\n     2\tb\n')

    def test_number_wider_than_field(self):
        sink = io.BytesIO()
        state = TransformState(line_number=999999)
        transformer = StreamTransformer(DisplayOptions(number=True), state, Writer(sink))

        transformer.transform(io.BytesIO(b'a\nb\n'))

        self.assertEqual(sink.getvalue(), b'999999\ta\n1000000\tb\n')
        self.assertEqual(state.line_number, 1000001)

    def test_number_continues_across_sources(self):
        self.assertEqual(transform(b'x\n', b'y\n', number=True), b'     1\tx\n     2\ty\n')

    def test_unterminated_line_continues_into_next_source(self):
        self.assertEqual(transform(b'x', b'y\nz\n', number=True), b'     1\txy\n     2\tz\n')

    def test_number_across_chunk_boundaries(self):
        result = transform(b'abc\ndef\n\n', chunk_size=1, number=True)
        self.assertEqual(result, b'     1\tabc\n     2\tdef\n     3\t\n')

    def test_shared_state_between_transformers(self):
        sink = io.BytesIO()
        state = TransformState()
        writer = Writer(sink)
        options = DisplayOptions(number=True)

        StreamTransformer(options, state, writer).transform(io.BytesIO(b'x\n'))
        StreamTransformer(options, state, writer).transform(io.BytesIO(b'y\n'))

        self.assertEqual(sink.getvalue(), b'     1\tx\n     2\ty\n')


class TransformerSqueezeTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_squeeze(self):
        self.assertEqual(transform(b'a\n\n\n\nb\n', squeeze_blank=True), b'a\n\nb\n')

    def test_single_blank_line_kept(self):
        self.assertEqual(transform(b'a\n\nb\n\nc\n', squeeze_blank=True), b'a\n\nb\n\nc\n')

    def test_squeeze_leading_blank_lines(self):
        self.assertEqual(transform(b'\n\n\na\n', squeeze_blank=True), b'\na\n')

    def test_squeeze_trailing_blank_lines(self):
        self.assertEqual(transform(b'a\n\n\n', squeeze_blank=True), b'a\n\n')

    def test_squeeze_across_sources(self):
        self.assertEqual(transform(b'a\n\n', b'\n\nb\n', squeeze_blank=True), b'a\n\nb\n')

    def test_whitespace_line_is_not_blank(self):
        self.assertEqual(transform(b'\t\n\n\n', squeeze_blank=True, show_tabs=True), b'^I\n\n')

    def test_squeeze_with_number(self):
        result = transform(b'a\n\n\n\nb\n', squeeze_blank=True, number=True)
        self.assertEqual(result, b'     1\ta\n     2\t\n     3\tb\n')

    def test_squeeze_with_number_nonblank(self):
        result = transform(b'a\n\n\n\nb\n', squeeze_blank=True, number_nonblank=True)
        self.assertEqual(result, b'     1\ta\n\n     2\tb\n')

    def test_squeeze_with_show_ends(self):
        self.assertEqual(transform(b'a\n\n\nb\n', squeeze_blank=True, show_ends=True), b'a$\n$\nb$\n')

    def test_prev_line_blank_cleared_inside_line(self):
        sink = io.BytesIO()
        state = TransformState()
        transformer = StreamTransformer(DisplayOptions(squeeze_blank=True), state, Writer(sink))

        transformer.feed(b'a\n\n')
        self.assertTrue(state.prev_line_blank)

        transformer.feed(b'b')
        self.assertFalse(state.prev_line_blank)
        self.assertFalse(state.line_beginning)


class TransformerDisplayTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_show_ends(self):
        self.assertEqual(transform(b'a\n', show_ends=True), b'a$\n')
        self.assertEqual(transform(b'a\n\nb', show_ends=True), b'a$\n$\nb')

    def test_show_tabs(self):
        self.assertEqual(transform(b'a\tb\n', show_tabs=True), b'a^Ib\n')

    def test_tabs_unchanged_without_show_tabs(self):
        self.assertEqual(transform(b'a\tb\x01\n', show_nonprinting=True), b'a\tb^A\n')

    def test_show_nonprinting(self):
        self.assertEqual(transform(b'\x01\x7f\xc8\x81\n', show_nonprinting=True), b'^A^?M-HM-^A\n')

    def test_show_nonprinting_and_ends(self):
        self.assertEqual(transform(b'dos\r\n', show_nonprinting=True, show_ends=True), b'dos^M$\n')

    def test_show_all(self):
        self.assertEqual(transform(b'\t\x01\xff\n', show_all=True), b'^I^AM-^?$\n')

    def test_show_all_with_number(self):
        self.assertEqual(transform(b'a\tb\n\n', show_all=True, number=True), b'     1\ta^Ib$\n     2\t$\n')


class TransformerErrorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_read_error(self):
        sink = io.BytesIO()
        source = mock.Mock()
        source.read1.side_effect = [b'a\n', OSError(errno.EIO, 'Input/output error')]
        transformer = StreamTransformer(DisplayOptions(number=True), TransformState(), Writer(sink))

        with self.assertRaises(ReadError) as cm:
            transformer.transform(source, 'broken.txt')

        self.assertEqual(str(cm.exception), 'broken.txt: Input/output error')
        self.assertEqual(cm.exception.subject, 'broken.txt')
        self.assertEqual(sink.getvalue(), b'     1\ta\n')
        self.assertEqual(transformer.state.line_number, 2)

    def test_source_without_read1(self):
        sink = io.BytesIO()
        source = mock.Mock(spec=['read'])
        source.read.side_effect = [b'abc', b'']
        transformer = StreamTransformer(DisplayOptions(), TransformState(), Writer(sink))

        transformer.transform(source)

        self.assertEqual(sink.getvalue(), b'abc')

    def test_write_error(self):
        sink = mock.Mock()
        sink.write.side_effect = BrokenPipeError(errno.EPIPE, 'Broken pipe')
        transformer = StreamTransformer(DisplayOptions(), TransformState(), Writer(sink))

        with self.assertRaises(WriteError) as cm:
            transformer.transform(io.BytesIO(b'a\n'))

        self.assertEqual(str(cm.exception), 'stdout: Broken pipe')


if __name__ == '__main__':
    unittest.main()
