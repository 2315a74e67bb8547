from httpcodes.reports.html import html_report
from httpcodes.reports.text import text_report


formats = {
    'text': text_report,
    'html': html_report,
}
