"""명령행 인자 파싱 테스트."""

from main import build_arg_parser, source_from_args


class TestArgs:
    def test_no_source(self):
        args = build_arg_parser().parse_args([])
        assert source_from_args(args) is None
        assert args.movie_id is None

    def test_direct_source(self):
        args = build_arg_parser().parse_args(
            ["https://cdn.example.com/a.mp4", "--title", "Parasite", "--subtitle", "2019 • Drama", "--poster", "p.jpg"]
        )
        source = source_from_args(args)
        assert source.video_url == "https://cdn.example.com/a.mp4"
        assert source.title == "Parasite"
        assert source.subtitle == "2019 • Drama"
        assert source.poster == "p.jpg"

    def test_local_file_title_from_stem(self, tmp_path):
        video = tmp_path / "holiday.mp4"
        video.write_bytes(b"")
        source = source_from_args(build_arg_parser().parse_args([str(video)]))
        assert source.title == "holiday"

    def test_movie_id(self):
        args = build_arg_parser().parse_args(["--movie-id", "m1", "--api-base", "http://api"])
        assert args.movie_id == "m1"
        assert args.api_base == "http://api"
