"""Korean UI strings."""

STRINGS: dict[str, str] = {
    # Unavailable page
    "Video Not Available": "영상을 재생할 수 없습니다",
    "This content is": "이 콘텐츠는",
    "is": "은(는)",
    "currently unavailable for playback.": "현재 재생할 수 없습니다.",
    "Please try again later or contact support if the issue persists.":
        "잠시 후 다시 시도하거나 문제가 계속되면 고객센터에 문의해 주세요.",
    # Controls
    "Play": "재생",
    "Pause": "일시정지",
    "Rewind": "뒤로 감기",
    "Forward": "앞으로 감기",
    "Mute": "음소거",
    "Unmute": "음소거 해제",
    "Volume": "볼륨",
    "Settings": "설정",
    "Playback Speed": "재생 속도",
    "Normal": "보통",
    "Fullscreen": "전체 화면",
    "Exit Fullscreen": "전체 화면 종료",
    "Loading": "불러오는 중",
    # Window / menu
    "&File": "파일(&F)",
    "&Open Video...": "동영상 열기(&O)...",
    "Open Video": "동영상 열기",
    "Open &URL...": "URL 열기(&U)...",
    "Open URL": "URL 열기",
    "Video URL:": "동영상 URL:",
    "E&xit": "종료(&X)",
    "Could not load movie": "영화 정보를 불러오지 못했습니다",
    "&Preferences...": "환경설정(&P)...",
    # Preferences dialog
    "Preferences": "환경설정",
    "General": "일반",
    "Shortcuts": "단축키",
    "Player": "플레이어",
    "Hide Controls After:": "컨트롤 숨김 지연:",
    "seconds": "초",
    "Skip Step:": "건너뛰기 간격:",
    "User Interface": "사용자 인터페이스",
    "Language:": "언어:",
    "Note: Language changes require restart": "참고: 언어 변경은 재시작 후 적용됩니다",
    "Action": "동작",
    "Shortcut": "단축키",
    "Reset All Shortcuts": "모든 단축키 초기화",
    "Play / Pause": "재생 / 일시정지",
    "Play / Pause (alternate)": "재생 / 일시정지 (보조)",
    "Toggle Fullscreen": "전체 화면 전환",
    "Toggle Mute": "음소거 전환",
    "Skip Forward": "앞으로 건너뛰기",
    "Skip Back": "뒤로 건너뛰기",
    "Volume Up": "볼륨 높이기",
    "Volume Down": "볼륨 낮추기",
}
