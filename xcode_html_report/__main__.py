from xcode_html_report.cli.args import app

if __name__ == "__main__":
    app(prog_name="xcode-html-report")
