"""Message template functions for ConsoleRenderer."""


def _get_message_templates(self, language: str) -> dict:
    """Get message templates for the specified language."""
    if language == 'vietnamese':
        return {
            'empty_commits': "Không có commit nào trong khoảng thời gian này",
            'empty_pull_requests': "Không có pull request nào trong khoảng thời gian này",
            'empty_reviews': "Không có review nào trong khoảng thời gian này",
            'empty_members': "Không có dữ liệu thành viên trong khoảng thời gian này",
            'loading_dashboard': "Đang tải...",
            'loading_member': "Đang tải chi tiết thành viên...",
            'back_to_dashboard': "Quay lại bảng xếp hạng",
        }
    else:  # english (default)
        return {
            'empty_commits': "No commits in this time range",
            'empty_pull_requests': "No pull requests in this time range",
            'empty_reviews': "No reviews in this time range",
            'empty_members': "No member data in this time range",
            'loading_dashboard': "Loading...",
            'loading_member': "Loading member details...",
            'back_to_dashboard': "Back to Dashboard",
        }


def _message(self, key: str, **kwargs) -> str:
    """Look up a template in the renderer's language and fill it in."""
    return self._get_message_templates(self.language)[key].format(**kwargs)
