"""Japanese tool copy."""

from __future__ import annotations

from typing import Final

from toolcatalog.foundation.core import FAQItem, LocaleContent

CONTENT: Final[dict[str, LocaleContent]] = {
    "edit-pdf": LocaleContent(
        title="PDF編集",
        meta_description="PDFをオンラインで編集。注釈、ハイライト、墨消し、コメント、図形や画像の追加に対応。",
        faq=(
            FAQItem(question="ファイルはサーバーにアップロードされますか？",
                    answer="いいえ。ファイルはブラウザ内で処理され、端末の外に送信されません。"),
        ),
    ),
    "sign-pdf": LocaleContent(
        title="PDF署名",
        meta_description="手書き、入力、画像アップロードでPDFに署名できます。",
    ),
    "crop-pdf": LocaleContent(
        title="PDFトリミング",
        meta_description="PDFページの余白を削除、または任意の範囲でトリミングします。",
    ),
}
