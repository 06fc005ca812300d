import os, streamlit as st

from todo_api.core.logging_setup import setup_logging
from todo_ui.rpc import RpcClient
from todo_ui.view_model import TodoBoard

API = os.getenv("API_URL", "http://localhost:8000/api/v1")

st.set_page_config(page_title="TODO.APP", layout="centered")

if "board" not in st.session_state:
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    board = TodoBoard(client=RpcClient(API))
    board.load()
    st.session_state.board = board

board: TodoBoard = st.session_state.board


def toggle(todo):
    board.toggle_complete(todo)
    # redraw the checkbox from the board, whether or not the toggle took
    st.session_state.pop(f"done-{todo.id}", None)


st.title("TODO.APP")
st.caption("Get stuff done")

if board.error:
    st.warning(board.error)

with st.form("create", clear_on_submit=True):
    st.subheader("Add new task")
    title = st.text_input("What needs to be done?")
    description = st.text_area("Add some details (optional)", height=80)
    if st.form_submit_button("Add task", disabled=board.is_loading, use_container_width=True):
        board.new_title = title
        board.new_description = description or None
        if board.create() is not None:
            st.rerun()

if not board.todos:
    st.info("No tasks yet! Add one above to get started.")

for todo in board.todos:
    with st.container(border=True):
        check_col, body_col = st.columns([1, 12])
        check_col.checkbox("done", value=todo.completed, key=f"done-{todo.id}",
                           label_visibility="collapsed", on_change=toggle, args=(todo,))

        with body_col:
            if board.editing_id == todo.id:
                board.edit_title = st.text_input("Title", value=board.edit_title, key=f"title-{todo.id}")
                board.edit_description = st.text_area(
                    "Description", value=board.edit_description or "", key=f"desc-{todo.id}", height=68,
                ) or None
                save_col, cancel_col = st.columns(2)
                if save_col.button("Save", key=f"save-{todo.id}", use_container_width=True):
                    board.save_edit()
                    st.rerun()
                if cancel_col.button("Cancel", key=f"cancel-{todo.id}", use_container_width=True):
                    board.cancel_edit()
                    st.rerun()
            else:
                title_md = f"~~{todo.title}~~" if todo.completed else todo.title
                st.markdown(f"**{title_md}**")
                if todo.description:
                    st.write(todo.description)
                meta_col, edit_col, del_col = st.columns([6, 1, 1])
                meta_col.caption(f"Created: {todo.created_at:%Y-%m-%d}")
                if edit_col.button("Edit", key=f"edit-{todo.id}"):
                    board.start_edit(todo)
                    st.rerun()
                if del_col.button("Delete", key=f"delete-{todo.id}"):
                    board.delete(todo.id)
                    st.rerun()

if st.button("Refresh tasks"):
    board.load()
    st.rerun()
