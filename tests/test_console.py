"""Tests for the console UI."""


class TestTable:
    """Tests for table rendering."""

    def test_wide_cells_are_not_truncated(self, ui):
        long_path = "/var/lib/docker/volumes/" + "x" * 120
        ui.table(["NAME", "SOURCE"], [["data", long_path]])

        lines = ui.out_lines()
        assert len(lines) == 2
        assert lines[1].endswith(long_path)

    def test_markup_is_not_interpreted(self, ui):
        ui.table(["ADDRESS"], [["[::]:80"], ["[bold]x[/bold]"]])

        lines = ui.out_lines()
        assert lines[1] == "[::]:80"
        assert lines[2] == "[bold]x[/bold]"

    def test_header_only(self, ui):
        ui.table(["PID", "USER"], [])

        assert ui.out_lines() == ["PID  USER"]

    def test_tsv_table(self, ui):
        ui.tsv_table(["NAME\tSTATUS", "web\tUp 2 hours", "db"])

        lines = ui.out_lines()
        assert lines[0].split() == ["NAME", "STATUS"]
        assert lines[1].split() == ["web", "Up", "2", "hours"]
        assert lines[2] == "db"
        assert lines[0].index("STATUS") == lines[1].index("Up")


class TestMessages:
    """Tests for text output."""

    def test_error_prefix(self, ui):
        ui.error("docker command not found.")
        ui.error("Error: No such object: nope")

        assert ui.err.splitlines() == [
            "Error: docker command not found.",
            "Error: No such object: nope",
        ]
        assert ui.out == ""

    def test_verbatim_keeps_brackets(self, ui):
        ui.verbatim(["listen [::]:80;", "    root /srv/[www];"])

        assert ui.out_lines() == ["listen [::]:80;", "    root /srv/[www];"]

    def test_details(self, ui):
        ui.details([("Name", "/web"), ("IP Address", "172.17.0.2")])

        lines = ui.out_lines()
        assert lines[0].split() == ["Name:", "/web"]
        assert lines[1].endswith("172.17.0.2")
        assert lines[0].index("/web") == lines[1].index("172.17.0.2")

    def test_banner(self, ui):
        ui.banner("devopsfetch Monitor Run: now", width=10)

        assert ui.out_lines() == ["=" * 10, "devopsfetch Monitor Run: now", "=" * 10]
