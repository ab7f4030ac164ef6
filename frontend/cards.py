import html

# Every value is escaped: place names and error text come from outside.

def status_html(status: str) -> str:
    return f'<div class="status-line">{html.escape(status or "")}</div>'

def current_card_html(current: dict) -> str:
    return f"""
    <div class="now-card">
        <h2>{html.escape(current['place'])}</h2>
        <small>{html.escape(current['coords'])}</small>
        <div class="now-temp">{html.escape(current['icon'])} {html.escape(current['temperature'])}</div>
        <div>{html.escape(current['summary'])}</div>
        <div>{html.escape(current['humidity'])} · {html.escape(current['wind'])}</div>
        <small>{html.escape(current['updated'])}</small>
    </div>
    """

def day_card_html(card: dict) -> str:
    return f"""
    <div class="day">
        <div class="dname">{html.escape(card['day_label'])}</div>
        <div class="dicon" title="{html.escape(card['summary'])}">{html.escape(card['icon'])}</div>
        <div class="dtemp">{html.escape(card['temperature'])}</div>
        <div class="dmeta"><span>{html.escape(card['summary'])}</span></div>
    </div>
    """
